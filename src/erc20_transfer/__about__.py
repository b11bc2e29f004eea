PACKAGE_NAME = "@agentic-ai/vincent-tool-erc20-transfer"
SEND_LIMIT_POLICY_NAME = "@agentic-ai/vincent-policy-send-counter-limit"

# Not read from the token contract; tokens with other precisions are mis-scaled.
DEFAULT_TOKEN_DECIMALS = 6
MAX_TRANSFER_AMOUNT = 1_000_000

__version__ = "0.1.0"
__docs__ = "Delegated ERC-20 transfer tool with policy-gated execution."

__all__ = [
    "DEFAULT_TOKEN_DECIMALS",
    "MAX_TRANSFER_AMOUNT",
    "PACKAGE_NAME",
    "SEND_LIMIT_POLICY_NAME",
    "__docs__",
    "__version__",
]
