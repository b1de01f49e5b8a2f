# app/models/payment.py
COLLECTION = "payment_requests"

PERIOD_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"

# Fields returned by the admin payment list
ADMIN_LIST_PROJECTION = {
    "_id": 1,
    "employeeEmail": 1,
    "employeeName": 1,
    "salary": 1,
    "monthAndYear": 1,
    "designation": 1,
    "isPaymentSuccess": 1,
    "paymentDate": 1,
    "transactionId": 1,
    "bankAccountNo": "$employee.bankAccountNo",
    "photoUrl": "$employee.userInfo.photoUrl",
}
