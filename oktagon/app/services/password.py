import secrets
import string

PASSWORD_SYMBOLS = "!@#$%^&*()-_=+"
PASSWORD_ALPHABETS = (
    string.ascii_lowercase,
    string.ascii_uppercase,
    string.digits,
    PASSWORD_SYMBOLS,
)


def generate_password(length: int = 10) -> str:
    """Random password containing at least one character of every alphabet"""
    if length < len(PASSWORD_ALPHABETS):
        raise ValueError(f"Password length must be at least {len(PASSWORD_ALPHABETS)}")

    characters = [secrets.choice(alphabet) for alphabet in PASSWORD_ALPHABETS]
    pool = "".join(PASSWORD_ALPHABETS)
    characters += [secrets.choice(pool) for _ in range(length - len(characters))]
    secrets.SystemRandom().shuffle(characters)
    return "".join(characters)
