import random

from termask.term.keys import KeyDecoder, KEY_MAP, build_tree


def test_all_keys_are_tuple():
    for key, val in KEY_MAP.items():
        assert isinstance(key, str), f"{repr(key)} not a string"
        assert isinstance(val, tuple), f"{repr(key)} value not tuple"
        assert all(
            isinstance(v, str) for v in val
        ), f"{repr(key)} sub-values not all str"


def test_key_names_are_not_chars():
    # A key name must never be mistaken for a typed character
    for val in KEY_MAP.values():
        for name in val:
            assert len(name) > 1


def test_key_decoder():

    keys = list(KEY_MAP.keys())

    # Remove the bare escape, because it's a prefix of many other
    # sequences, so that e.g. escape followed by backspace is ambiguous.
    keys.remove("\x1b")

    for sep in ["", " ", "a"]:
        compare_with_keys(keys, sep)
        compare_with_keys(reversed(keys), sep)

        for _ in range(1000):
            random_keys = [random.sample(keys, 1)[0] for _ in range(50)]
            compare_with_keys(random_keys, sep)


def test_key_decoder_common_keys():
    check_decoder(b"abc\r", ["a", "b", "c", "enter"])
    check_decoder(b"abc\n", ["a", "b", "c", "enter"])
    check_decoder(b"ab\x7fc", ["a", "b", "backspace", "c"])
    check_decoder(b"\x08", ["backspace"])
    check_decoder(b"\x1b[A\x1b[D", ["up", "left"])
    check_decoder(b"\x03", ["ctrl+c"])
    check_decoder(b"\t", ["tab"])


def test_key_decoder_escape():
    check_decoder(b" \x1b ", [" ", "escape", " "])
    check_decoder(b" \x1b", [" ", "escape"])
    check_decoder(b"\x1b\x1b", ["escape", "escape"])
    check_decoder(b"\x1bx", ["escape", "x"])


def test_key_decoder_partial():
    # As a whole
    decoder = KeyDecoder()
    result = decoder.decode(b"\x1b[A")
    assert result == ["up"]

    # Char by char
    decoder = KeyDecoder()
    assert decoder.decode(b"\x1b") == []
    assert decoder.pending
    assert decoder.decode(b"[") == []
    assert decoder.decode(b"A") == ["up"]
    assert not decoder.pending

    # In two pieces
    decoder = KeyDecoder()
    assert decoder.decode(b"\x1b[") == []
    assert decoder.decode(b"A") == ["up"]

    # Char by char, with flushes
    decoder = KeyDecoder()
    assert decoder.decode(b"\x1b", True) == ["escape"]
    assert decoder.decode(b"[", True) == ["["]
    assert decoder.decode(b"A", True) == ["A"]


def test_key_decoder_multibyte():
    # Each code point is one key, no matter how many bytes
    check_decoder("é€😀".encode(), ["é", "€", "😀"])

    # A character can be split between reads
    bb = "€".encode()
    assert len(bb) == 3
    decoder = KeyDecoder()
    assert decoder.decode(bb[:1]) == []
    assert decoder.decode(bb[1:2]) == []
    assert decoder.decode(bb[2:] + b"x") == ["€", "x"]


def test_key_decoder_invalid_bytes():
    # Undecodable bytes become the replacement character
    check_decoder(b"a\xffb", ["a", "\ufffd", "b"])


def test_build_tree():
    tree = build_tree({"\x1b": ("escape",), "\x1b[A": ("up",), "x": ("x",)})
    assert tree["x"] == ("x",)
    assert tree["\x1b"][""] == ("escape",)
    assert tree["\x1b"]["["]["A"] == ("up",)

    # Order does not matter
    tree = build_tree({"\x1b[A": ("up",), "\x1b": ("escape",)})
    assert tree["\x1b"][""] == ("escape",)
    assert tree["\x1b"]["["]["A"] == ("up",)


def compare_with_keys(keys, sep=""):

    input = ""
    expected = []

    for key in keys:
        input += key
        expected.extend(KEY_MAP[key])
        input += sep
        for s in sep:
            expected.append(s)

    check_decoder(input.encode(), expected)


def check_decoder(input, expected):
    decoder = KeyDecoder()
    result = decoder.decode(input, flush=True)

    info = "decoded result differs from expectation:\n\n"
    info += "input: " + repr(input) + "\n\n"
    if result != expected:
        info += f"  {'RESULT':>12}  EXPECTED\n\n"
        for v1, v2 in zip(result, expected):
            info += "X "[v1 == v2] + f" {v1:>12}  {v2}\n"
        for v1 in result[len(expected):]:
            info += f"+ {v1:>12}  \n"
        for v2 in expected[len(result):]:
            info += f"- {'':>12}  {v2}\n"
    assert result == expected, info


if __name__ == "__main__":
    test_key_decoder_partial()
    test_key_decoder()
    test_key_decoder_escape()
