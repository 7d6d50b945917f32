"""Errors raised by the chain clients."""


class ChainError(Exception):
    """Base class for blockchain interaction failures."""


class ChainUnavailable(ChainError):
    """The RPC endpoint could not be reached or returned an error."""


class InvalidAddress(ChainError, ValueError):
    """A value that should be an account address is not one."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Invalid address: {address}")


class TransferVerificationError(ChainError):
    """A reported transaction does not match the expected transfer."""

    def __init__(self, tx_hash: str, reason: str):
        self.tx_hash = tx_hash
        self.reason = reason
        super().__init__(f"Transaction {tx_hash} rejected: {reason}")


class PaymentError(Exception):
    """Base class for client-side payment failures."""


class WalletUnavailable(PaymentError):
    """No wallet provider is configured or it exposes no account."""


class InsufficientBalance(PaymentError):
    def __init__(self, address: str, balance: int, required: int):
        self.address = address
        self.balance = balance
        self.required = required
        super().__init__(
            f"Insufficient balance on {address}: have {balance}, need {required}"
        )


class TransactionFailed(PaymentError):
    def __init__(self, message: str, tx_hash: str | None = None):
        self.tx_hash = tx_hash
        super().__init__(message)


class ServerVerificationFailed(PaymentError):
    """The backend refused to record a payment that went through on chain."""

    def __init__(self, tx_hash: str, status_code: int, body: dict | None = None):
        self.tx_hash = tx_hash
        self.status_code = status_code
        self.body = body or {}
        super().__init__(
            f"Failed to verify payment {tx_hash} with server (HTTP {status_code})"
        )
