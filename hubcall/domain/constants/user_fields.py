"""Constants for User model field names"""


class UserFields:
    """Field name constants for User documents"""
    ID = "id"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    MOBILE = "mobile"
    AGE = "age"
    HASHED_PASSWORD = "password"
    TERMS_ACCEPTED = "termsAccepted"
    PROFILE_PICTURE = "profilePicture"
    STATUS = "status"
    IS_VERIFIED = "isVerified"
    LAST_LOGIN = "lastLogin"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    # Fields a profile update may change
    MUTABLE_PROFILE_FIELDS = (FIRST_NAME, LAST_NAME, AGE, PROFILE_PICTURE)

    # Fields backed by a unique index
    UNIQUE_FIELDS = (EMAIL, MOBILE)
