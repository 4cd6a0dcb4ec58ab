# VIES uses "EL" for Greece. "GB" is kept for numbers issued before Brexit, "XI" is Northern Ireland.
EU_COUNTRY_CODES: frozenset[str] = frozenset(
    {
        "AT", "BE", "BG", "HR", "CY", "CZ", "DK", "EE", "FI", "FR",
        "DE", "EL", "HU", "IE", "IT", "LV", "LT", "LU", "MT", "NL",
        "PL", "PT", "RO", "SK", "SI", "ES", "SE", "GB", "XI",
    }
)  # fmt: skip
