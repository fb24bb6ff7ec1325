# Common Nigerian names so fallback results look like real account holders
FIRST_NAMES = (
    "Ade", "Chukwu", "Ibrahim", "Musa", "Oluwaseun", "Fatima", "Amina",
    "Emeka", "Ngozi", "Kemi", "John", "Mary", "David", "Grace",
)

LAST_NAMES = (
    "Adebayo", "Okafor", "Mohammed", "Ibrahim", "Okoro", "Adekunle", "Bello",
    "Okafor", "Nwankwo", "Adeyemi", "Smith", "Johnson", "Williams", "Brown",
)


def generate_mock_name(account_number: str) -> str:
    """
    Build a stable, upper-cased full name from an account number.

    Only the last four digits matter, reduced to a seed in [0, 100):
    the first name is picked by ``seed % len(FIRST_NAMES)`` and the last
    name by ``(seed // 10) % len(LAST_NAMES)``. Different accounts may share
    a name; the same account always gets the same one.
    """
    seed = int(account_number[-4:]) % 100
    first_name = FIRST_NAMES[seed % len(FIRST_NAMES)]
    last_name = LAST_NAMES[(seed // 10) % len(LAST_NAMES)]

    return f"{first_name} {last_name}".upper()
