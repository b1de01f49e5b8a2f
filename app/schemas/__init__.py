from .user import UserInfo, UserCreate, SalaryUpdate
from .tokens import TokenRequest, TokenResponse, SessionUser
from .work_sheet import WorkSheetCreate, WorkSheetUpdate
from .payment import PaymentRequestCreate, PaymentSettle, PaymentHistory
