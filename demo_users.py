"""
Demo Users Data for the Employee Management Application
One admin, two HR staff and a handful of employees with work sheets and payments
"""

# Demo Users Data
DEMO_USERS = [
    # ADMIN - seeded directly, admins cannot self-register
    {
        "userInfo": {"email": "admin@company.com", "name": "Nadia Rahman", "photoUrl": None},
        "role": "admin",
        "isVerified": True,
        "bankAccountNo": None,
        "designation": "Managing Director",
        "salary": None,
    },

    # HR
    {
        "userInfo": {"email": "farhan.hr@company.com", "name": "Farhan Ahmed", "photoUrl": None},
        "role": "hr",
        "isVerified": True,
        "bankAccountNo": "2001457890",
        "designation": "HR Executive",
        "salary": 4200,
    },
    {
        "userInfo": {"email": "lamia.hr@company.com", "name": "Lamia Chowdhury", "photoUrl": None},
        "role": "hr",
        "isVerified": True,
        "bankAccountNo": "2001457891",
        "designation": "HR Manager",
        "salary": 5200,
    },

    # EMPLOYEES
    {
        "userInfo": {"email": "rafi.islam@company.com", "name": "Rafi Islam", "photoUrl": None},
        "role": "employee",
        "isVerified": True,
        "bankAccountNo": "3001002001",
        "designation": "Sales Assistant",
        "salary": 2500,
    },
    {
        "userInfo": {"email": "tania.akter@company.com", "name": "Tania Akter", "photoUrl": None},
        "role": "employee",
        "isVerified": True,
        "bankAccountNo": "3001002002",
        "designation": "Social Media Executive",
        "salary": 2800,
    },
    {
        "userInfo": {"email": "sabbir.hossain@company.com", "name": "Sabbir Hossain", "photoUrl": None},
        "role": "employee",
        "isVerified": False,  # waiting for HR to verify
        "bankAccountNo": "3001002003",
        "designation": "Digital Marketer",
        "salary": 3000,
    },
]

# Work sheet entries per employee email
DEMO_WORK_SHEETS = {
    "rafi.islam@company.com": [
        ("Sales", 6, "2024-05-02"),
        ("Support", 4, "2024-05-03"),
        ("Paper-work", 2, "2024-06-04"),
    ],
    "tania.akter@company.com": [
        ("Content", 5, "2024-05-02"),
        ("Content", 7, "2024-06-10"),
    ],
}

# Settled payment periods per employee email
DEMO_PAYMENTS = {
    "rafi.islam@company.com": ["2024-03", "2024-04", "2024-05"],
    "tania.akter@company.com": ["2024-04", "2024-05"],
}
