from mfakit.domain.services import secure_compare


def test_secure_compare_behavior():
    assert secure_compare("abcd", "abcd") is True
    assert secure_compare("abcd", "abce") is False
    assert secure_compare("", "") is True
    assert secure_compare("a", "") is False


def test_secure_compare_handles_non_ascii():
    assert secure_compare("123456", "12345é") is False
    assert secure_compare("é", "é") is True
