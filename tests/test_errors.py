import io

import pytest

from libmykit import errors


def test_success_message():
    assert errors.error_message(0) == "Success."


def test_known_messages():
    assert errors.error_message(2) == "No such file or directory."
    assert errors.error_message(133) == "Memory page has hardware error."


@pytest.mark.parametrize("err", [-1, 134, 1000])
def test_unknown_error_number_raises(err):
    with pytest.raises(ValueError):
        errors.error_message(err)


def test_every_message_ends_with_dot():
    for err in range(errors.MAX_ERRNO + 1):
        assert errors.error_message(err).endswith(".")


def test_put_error_with_label():
    stream = io.StringIO()
    written = errors.put_error("open", 2, stream)
    assert stream.getvalue() == "open: No such file or directory.\n"
    assert written == len(stream.getvalue())


def test_put_error_without_label():
    stream = io.StringIO()
    errors.put_error(None, 13, stream)
    assert stream.getvalue() == "Permission denied.\n"


def test_put_error_out_of_range_writes_nothing():
    stream = io.StringIO()
    assert errors.put_error("x", 500, stream) == 0
    assert stream.getvalue() == ""


def test_lput_error_writes_when_enabled():
    stream = io.StringIO()
    errors.lput_error("f", 22, stream)
    assert stream.getvalue() == "f: Invalid argument.\n"


def test_lput_error_silent_when_disabled(monkeypatch):
    monkeypatch.setattr(errors, "PRINT_ERRORS", False)
    stream = io.StringIO()
    assert errors.lput_error("f", 22, stream) == 0
    assert stream.getvalue() == ""


def test_put_os_error_uses_errno():
    stream = io.StringIO()
    errors.put_os_error("read_file", FileNotFoundError(2, "missing"), stream)
    assert stream.getvalue() == "read_file: No such file or directory.\n"


def test_put_os_error_without_errno():
    stream = io.StringIO()
    assert errors.put_os_error("x", OSError("plain"), stream) == 0
    assert stream.getvalue() == ""