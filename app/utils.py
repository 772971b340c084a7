import re

_NON_DIGITS = re.compile(r"\D")


def only_digits(value) -> str:
    """Remove tudo que não for dígito (CPF, CNPJ, telefone)."""
    if value is None:
        return ""
    return _NON_DIGITS.sub("", str(value))
