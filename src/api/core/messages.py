"""Centralized message codes and default messages for API responses."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel


class MessageCode(str, Enum):
    """Centralized message codes for API responses."""

    # Success codes
    SUCCESS = "SUCCESS"

    # Authentication & Authorization
    AUTH_REQUIRED = "AUTH_REQUIRED"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    AUTH_INSUFFICIENT_ROLE = "AUTH_INSUFFICIENT_ROLE"

    # User management
    USER_REGISTERED = "USER_REGISTERED"
    USER_UPDATED = "USER_UPDATED"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    EMAIL_ALREADY_REGISTERED = "EMAIL_ALREADY_REGISTERED"

    # Welfare organizations
    WELFARE_NOT_FOUND = "WELFARE_NOT_FOUND"
    WELFARE_NOT_APPROVED = "WELFARE_NOT_APPROVED"
    WELFARE_UPDATED = "WELFARE_UPDATED"
    WELFARE_WALLET_MISSING = "WELFARE_WALLET_MISSING"
    WELFARE_SAVED = "WELFARE_SAVED"
    WELFARE_UNSAVED = "WELFARE_UNSAVED"
    WELFARE_ALREADY_SAVED = "WELFARE_ALREADY_SAVED"
    SAVED_WELFARE_NOT_FOUND = "SAVED_WELFARE_NOT_FOUND"

    # Cases & donations
    CASE_CREATED = "CASE_CREATED"
    CASE_UPDATED = "CASE_UPDATED"
    CASE_NOT_FOUND = "CASE_NOT_FOUND"
    CASE_NOT_ACTIVE = "CASE_NOT_ACTIVE"
    DONATION_RECORDED = "DONATION_RECORDED"
    DONATION_VALUE_TOO_LOW = "DONATION_VALUE_TOO_LOW"
    CASE_UPDATE_POSTED = "CASE_UPDATE_POSTED"
    CASE_UPDATE_EDITED = "CASE_UPDATE_EDITED"
    CASE_UPDATE_DELETED = "CASE_UPDATE_DELETED"
    CASE_UPDATE_NOT_FOUND = "CASE_UPDATE_NOT_FOUND"

    # Emergencies
    EMERGENCY_REPORTED = "EMERGENCY_REPORTED"
    EMERGENCY_UPDATED = "EMERGENCY_UPDATED"
    EMERGENCY_NOT_FOUND = "EMERGENCY_NOT_FOUND"
    EMERGENCY_ALREADY_CONVERTED = "EMERGENCY_ALREADY_CONVERTED"
    EMERGENCY_CONVERTED = "EMERGENCY_CONVERTED"

    # Doctors
    DOCTOR_REGISTERED = "DOCTOR_REGISTERED"
    DOCTOR_UPDATED = "DOCTOR_UPDATED"
    DOCTOR_REMOVED = "DOCTOR_REMOVED"
    DOCTOR_NOT_FOUND = "DOCTOR_NOT_FOUND"

    # Adoptions
    ADOPTION_CREATED = "ADOPTION_CREATED"
    ADOPTION_NOT_FOUND = "ADOPTION_NOT_FOUND"
    ADOPTION_NOT_AVAILABLE = "ADOPTION_NOT_AVAILABLE"
    ADOPTION_REQUEST_CREATED = "ADOPTION_REQUEST_CREATED"
    ADOPTION_REQUEST_UPDATED = "ADOPTION_REQUEST_UPDATED"
    ADOPTION_REQUEST_NOT_FOUND = "ADOPTION_REQUEST_NOT_FOUND"
    ADOPTION_REQUEST_ALREADY_PAID = "ADOPTION_REQUEST_ALREADY_PAID"
    ADOPTION_COMPLETED = "ADOPTION_COMPLETED"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"

    # Payments
    PAYMENT_RECORDED = "PAYMENT_RECORDED"
    PAYMENT_AMOUNT_TOO_LOW = "PAYMENT_AMOUNT_TOO_LOW"
    PAYMENT_VERIFICATION_FAILED = "PAYMENT_VERIFICATION_FAILED"
    TRANSACTION_ALREADY_USED = "TRANSACTION_ALREADY_USED"
    INVALID_ADDRESS = "INVALID_ADDRESS"

    # Messages
    MESSAGE_NOT_FOUND = "MESSAGE_NOT_FOUND"
    MESSAGE_READ = "MESSAGE_READ"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    REQUEST_TOO_LARGE = "REQUEST_TOO_LARGE"

    # Service Errors
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    CONFLICT = "CONFLICT"


# Default messages for each message code
DEFAULT_MESSAGES = {
    # Success messages
    MessageCode.SUCCESS: "Operation completed successfully",
    # Authentication & Authorization
    MessageCode.AUTH_REQUIRED: "Authentication required",
    MessageCode.UNAUTHORIZED: "Authentication required",
    MessageCode.FORBIDDEN: "Access denied",
    MessageCode.INVALID_TOKEN: "Invalid authentication token",
    MessageCode.TOKEN_EXPIRED: "Token expired. Please log in again.",
    MessageCode.INVALID_CREDENTIALS: "Invalid email or password",
    MessageCode.AUTH_INSUFFICIENT_ROLE: "Insufficient role for this action",
    # User management
    MessageCode.USER_REGISTERED: "User registered successfully",
    MessageCode.USER_UPDATED: "User updated successfully",
    MessageCode.USER_NOT_FOUND: "User not found",
    MessageCode.EMAIL_ALREADY_REGISTERED: "Email is already registered",
    # Welfare organizations
    MessageCode.WELFARE_NOT_FOUND: "Welfare organization not found",
    MessageCode.WELFARE_NOT_APPROVED: "Welfare organization is not approved",
    MessageCode.WELFARE_UPDATED: "Welfare organization updated successfully",
    MessageCode.WELFARE_WALLET_MISSING: "Welfare organization has no wallet address",
    MessageCode.WELFARE_SAVED: "Welfare organization saved",
    MessageCode.WELFARE_UNSAVED: "Welfare organization removed from saved list",
    MessageCode.WELFARE_ALREADY_SAVED: "Welfare organization is already saved",
    MessageCode.SAVED_WELFARE_NOT_FOUND: (
        "Welfare organization is not in your saved list"
    ),
    # Cases & donations
    MessageCode.CASE_CREATED: "Case created successfully",
    MessageCode.CASE_UPDATED: "Case updated successfully",
    MessageCode.CASE_NOT_FOUND: "Case not found",
    MessageCode.CASE_NOT_ACTIVE: "Case is not accepting donations",
    MessageCode.DONATION_RECORDED: "Donation recorded successfully",
    MessageCode.DONATION_VALUE_TOO_LOW: "Donation value is too small to credit",
    MessageCode.CASE_UPDATE_POSTED: "Case update posted successfully",
    MessageCode.CASE_UPDATE_EDITED: "Case update edited successfully",
    MessageCode.CASE_UPDATE_DELETED: "Case update deleted successfully",
    MessageCode.CASE_UPDATE_NOT_FOUND: "Case update not found",
    # Emergencies
    MessageCode.EMERGENCY_REPORTED: "Emergency reported successfully",
    MessageCode.EMERGENCY_UPDATED: "Emergency updated successfully",
    MessageCode.EMERGENCY_NOT_FOUND: "Emergency not found",
    MessageCode.EMERGENCY_ALREADY_CONVERTED: (
        "Emergency is already resolved or converted"
    ),
    MessageCode.EMERGENCY_CONVERTED: "Emergency converted to a case",
    # Doctors
    MessageCode.DOCTOR_REGISTERED: "Doctor registered successfully",
    MessageCode.DOCTOR_UPDATED: "Doctor updated successfully",
    MessageCode.DOCTOR_REMOVED: "Doctor removed successfully",
    MessageCode.DOCTOR_NOT_FOUND: "Doctor not found",
    # Adoptions
    MessageCode.ADOPTION_CREATED: "Adoption listing created successfully",
    MessageCode.ADOPTION_NOT_FOUND: "Adoption not found",
    MessageCode.ADOPTION_NOT_AVAILABLE: "Adoption is no longer available",
    MessageCode.ADOPTION_REQUEST_CREATED: "Adoption request created successfully",
    MessageCode.ADOPTION_REQUEST_UPDATED: "Adoption request updated successfully",
    MessageCode.ADOPTION_REQUEST_NOT_FOUND: "Adoption request not found",
    MessageCode.ADOPTION_REQUEST_ALREADY_PAID: "Adoption request has already been paid",
    MessageCode.ADOPTION_COMPLETED: "Adoption completed successfully",
    MessageCode.INVALID_STATUS_TRANSITION: "Status change not allowed",
    # Payments
    MessageCode.PAYMENT_RECORDED: "Payment verified and recorded",
    MessageCode.PAYMENT_AMOUNT_TOO_LOW: "Payment amount is less than required",
    MessageCode.PAYMENT_VERIFICATION_FAILED: "Payment could not be verified on chain",
    MessageCode.TRANSACTION_ALREADY_USED: "Transaction hash has already been used",
    MessageCode.INVALID_ADDRESS: "Invalid wallet address",
    # Messages
    MessageCode.MESSAGE_NOT_FOUND: "Message not found",
    MessageCode.MESSAGE_READ: "Message marked as read",
    # Validation errors
    MessageCode.VALIDATION_ERROR: "Validation failed",
    MessageCode.INVALID_INPUT: "Invalid input provided",
    MessageCode.REQUEST_TOO_LARGE: "Request body too large",
    # Service Errors
    MessageCode.EXTERNAL_SERVICE_ERROR: "External service error",
    # Generic errors
    MessageCode.INTERNAL_ERROR: "Internal server error",
    MessageCode.RESOURCE_NOT_FOUND: "Resource not found",
    MessageCode.BAD_REQUEST: "Bad request",
    MessageCode.CONFLICT: "Resource conflict",
}

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Base API response model with consistent structure and proper typing."""

    message_code: MessageCode
    message: str
    data: T | None = None

    @classmethod
    def success(
        cls,
        message_code: MessageCode = MessageCode.SUCCESS,
        message: str | None = None,
        data: T | None = None,
    ) -> "APIResponse[T]":
        """Create a success response."""
        return cls(
            message_code=message_code,
            message=message or DEFAULT_MESSAGES.get(message_code, "Success"),
            data=data,
        )


def get_default_message(message_code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(message_code, "Operation completed")
