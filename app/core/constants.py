# app/core/constants.py

# ==========================================================
# FIRESTORE FIELDS
# ==========================================================
STUDENT_ID_FIELD = "student_id"
CONTACT_FIELD = "contact"
GUARDIAN_CONTACT_FIELD = "guardianContact"

# ==========================================================
# RESPONSE MESSAGES (shown to the parent portal as-is)
# ==========================================================
MSG_METHOD_NOT_ALLOWED = "Method Not Allowed"
MSG_FIELDS_REQUIRED = "Student ID and Contact Number are required."
MSG_STUDENT_NOT_FOUND = "Student ID not found."
MSG_CONTACT_MISMATCH = "Contact number does not match registered details."
MSG_INTERNAL_ERROR = "An internal server error occurred. Please try again later."
