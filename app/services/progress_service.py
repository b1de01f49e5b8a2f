from pymongo.database import Database
from typing import Any, Dict, List, Optional

from app.database import serialize
from app.models import work_sheet as work_sheet_model
from app.utils.query import QueryBuilder


class ProgressService:
    @staticmethod
    def progress(
        db: Database,
        filter_name: Optional[str] = None,
        filter_date: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Work sheet entries narrowed by employee name and/or period ("all" means any)"""
        query = (
            QueryBuilder()
            .where("name", filter_name)
            .where("monthAndYear", filter_date)
            .build()
        )
        return [serialize(doc) for doc in db[work_sheet_model.COLLECTION].find(query)]
