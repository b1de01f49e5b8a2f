# app/models/user.py
import enum

COLLECTION = "user"


class Role(str, enum.Enum):
    EMPLOYEE = "employee"
    HR = "hr"
    ADMIN = "admin"


# Roles that change_role swaps between; admin is left untouched
ROLE_SWAP = {
    Role.EMPLOYEE.value: Role.HR.value,
    Role.HR.value: Role.EMPLOYEE.value,
}

# Dotted path of the unique login key inside a user document
EMAIL_FIELD = "userInfo.email"
