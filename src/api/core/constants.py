API_VERSION_HEADER = "X-WelfareChain-Version"

# JWT Configuration
JWT_ALGORITHM = "HS256"
BEARER_SCHEME = "bearer"

# Paths the request logger stays quiet about
SKIP_LOGGING_PATHS = {
    "/health",
    "/health/liveness",
}

# Case listing on the public dashboard
MAX_PUBLIC_CASES = 200

ADOPTION_APPROVED_MESSAGE = (
    "Congratulations! Your adoption request for {name} has been approved.\n\n"
    "To complete the adoption process, please make the adoption fee payment of "
    "{fee} USDT worth of ETH to the following wallet address:\n`{recipient}`\n\n"
    'You can make the payment from the "My Requests" section of your dashboard. '
    "The payment is verified on chain before the adoption is finalized."
)
ADOPTION_REJECTED_MESSAGE = (
    "We regret to inform you that your adoption request for {name} was not "
    "approved. Thank you for your interest and support."
)
PAYMENT_RECEIVED_MESSAGE = (
    "Payment of {amount} USDT has been verified on chain (transaction {tx_hash}) "
    "for the adoption of {name}. The organization will finalize the adoption."
)
ADOPTION_COMPLETED_MESSAGE = (
    "Your adoption of {name} is complete. Please contact the organization to "
    "arrange the pickup."
)

# Latest success stories shown on the landing page
FEATURED_SUCCESS_STORIES = 6
