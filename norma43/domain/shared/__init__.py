"""
Utilidades compartidas del dominio.

Estas funciones son usadas por los decodificadores de registros y por los
adaptadores, y no dependen de ninguna librería externa. Solo operan sobre
tipos nativos de Python.

Uso:
    from norma43.domain.shared.currency import code_to_number, number_to_code
    from norma43.domain.shared.check_digits import compute_ccc_check_digits, ccc_to_iban
    from norma43.domain.shared.money import parse_fixed_amount
    from norma43.domain.shared.date_parser import parse_n43_date
    from norma43.domain.shared.text_cleaner import clean_n43_text, field
"""
