import dataclasses

import pytest

from mfakit.domain.entities import MFAPrincipal


def test_email_is_normalized():
    p = MFAPrincipal(id=1, email="  Jeremy@Example.COM ")
    assert p.email == "jeremy@example.com"


def test_blank_email_becomes_none():
    assert MFAPrincipal(id=1, email="   ").email is None


@pytest.mark.parametrize("bad_id", [None, "", "   "])
def test_id_is_required(bad_id):
    with pytest.raises(ValueError):
        MFAPrincipal(id=bad_id)


def test_integer_and_string_ids():
    assert MFAPrincipal(id=0).id == 0
    assert MFAPrincipal(id="abc").id == "abc"


def test_label_falls_back_to_user():
    assert MFAPrincipal(id=1, email="a@b.c").label == "a@b.c"
    assert MFAPrincipal(id=1).label == "user"


def test_principal_is_immutable():
    p = MFAPrincipal(id=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.mfa_secret = "X"  # type: ignore[misc]
