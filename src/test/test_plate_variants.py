from src.infrastructure.Normalizer.plate_variants import PlateTextVariants


def test_variants_in_order():
    variants = PlateTextVariants().variants("S0 B1")

    assert variants == [
        "S0 B1",   # original
        "S0B1",    # sin espacios
        "SO B1",   # 0 -> O
        "S0 B1",   # O -> 0
        "S0 B1",   # I -> 1
        "S0 BI",   # 1 -> I
        "50 B1",   # S -> 5
        "S0 B1",   # 5 -> S
        "S0 81",   # B -> 8
        "S0 B1",   # 8 -> B
        "S0 B1",   # mayúsculas
    ]


def test_uppercase_variant_last():
    assert PlateTextVariants().variants("ca 1")[-1] == "CA 1"


def test_empty_text():
    assert PlateTextVariants().variants("") == []
