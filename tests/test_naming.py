from __future__ import annotations

from fieldreflect.utils.naming import capitalize_first_letter, demangle, is_private_name, mangle


class Account:
    pass


class _Hidden:
    pass


class __:
    pass


def test_capitalize_first_letter():
    assert capitalize_first_letter("fooBar") == "FooBar"
    assert capitalize_first_letter("x") == "X"
    assert capitalize_first_letter("") == ""


def test_private_names():
    assert is_private_name("__secret")
    assert not is_private_name("__init__")
    assert not is_private_name("_protected")


def test_mangle_and_demangle():
    assert mangle("__secret", Account) == "_Account__secret"
    assert mangle("__secret", _Hidden) == "_Hidden__secret"
    assert mangle("public", Account) == "public"
    assert mangle("__secret", __) == "__secret"

    assert demangle("_Account__secret", Account) == "__secret"
    assert demangle("_Hidden__secret", _Hidden) == "__secret"
    assert demangle("_Other__secret", Account) == "_Other__secret"
    assert demangle("public", Account) == "public"
