import secrets

RESET_TOKEN_BYTES = 32


def generate_reset_token() -> str:
    """32 bytes from the OS CSPRNG, hex encoded (64 chars)"""
    return secrets.token_hex(RESET_TOKEN_BYTES)
