import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

import huffman
from errors import InvalidInput, TruncatedInputError, UnknownSymbolError
from huffman import HuffmanTable
from weights import WeightTable


def test_greetings_scenario(greetings):
    table = huffman.build(greetings)
    message = ["howdy", "howdy", "hey", "hello"]
    bits = huffman.encode(table, message)
    lengths = table.codes.code_lengths()
    assert len(bits) == sum(lengths[s] for s in message)
    assert huffman.decode(table, bits) == message
    assert huffman.decode_owned(table, bits) == message
    assert list(huffman.decode_iter(table, bits)) == message


def test_random_roundtrip(random_weights, random_message):
    table = HuffmanTable(random_weights)
    bits = table.encode(random_message)
    assert table.decode(bits) == random_message
    assert table.decode_owned(bits) == random_message


def test_skewed_roundtrip(fibonacci_weights):
    table = HuffmanTable(fibonacci_weights)
    message = [s for s, w in fibonacci_weights for _ in range(w)]
    assert table.decode(table.encode(message)) == message


def test_single_symbol_repetitions():
    table = huffman.build([("only", 99)])
    bits = table.encode(["only"] * 12)
    assert len(bits) == 12
    assert table.decode(bits) == ["only"] * 12


def test_empty_sequences(greetings):
    table = huffman.build(greetings)
    assert len(table.encode([])) == 0
    assert table.decode(table.encode([])) == []


def test_build_errors():
    with pytest.raises(InvalidInput):
        _ = huffman.build([])
    with pytest.raises(InvalidInput):
        _ = huffman.build([("a", 1), ("a", 2)])
    with pytest.raises(InvalidInput):
        _ = huffman.build([("a", 0)])


def test_encode_decode_errors(greetings):
    table = huffman.build(greetings)
    with pytest.raises(UnknownSymbolError):
        _ = huffman.encode(table, ["hey", "yo"])
    with pytest.raises(TruncatedInputError):
        _ = huffman.decode(table, "1")
    with pytest.raises(TruncatedInputError):
        _ = huffman.decode_owned(table, "0001")


def test_accepts_weight_table_and_mapping(greetings):
    from_pairs = HuffmanTable(greetings)
    from_table = HuffmanTable(WeightTable(greetings))
    from_dict = HuffmanTable(dict(greetings))
    expected = {s: c.to01() for s, c in from_pairs.codes}
    assert {s: c.to01() for s, c in from_table.codes} == expected
    assert {s: c.to01() for s, c in from_dict.codes} == expected


def test_deterministic_encoding(random_weights, random_message):
    first = HuffmanTable(random_weights).encode(random_message)
    for _ in range(3):
        assert HuffmanTable(random_weights).encode(random_message) == first


def test_split(greetings):
    table = HuffmanTable(greetings)
    encoder, decoder = table.split()
    message = ["hello", "howdy", "hey"]
    assert decoder.decode(encoder.encode(message)) == message
    assert encoder.codes is decoder.codes is table.codes


def test_table_introspection(greetings):
    table = HuffmanTable(greetings)
    assert len(table) == 3
    assert "hey" in table and "hi" not in table
    assert table.root.weight == 6
    assert table.weights.symbols == ("hello", "hey", "howdy")
    assert "3 symbols" in repr(table)


def test_concurrent_use(random_weights, random_message):
    table = HuffmanTable(random_weights)

    def roundtrip(offset):
        message = random_message[offset:] + random_message[:offset]
        return table.decode(table.encode(message)) == message

    with ThreadPoolExecutor(max_workers=4) as pool:
        assert all(pool.map(roundtrip, range(0, 500, 25)))


def test_build_logs_debug(caplog, greetings):
    with caplog.at_level(logging.DEBUG, logger="huffman"):
        HuffmanTable(greetings)
    assert any(
        "weighted length 9 bits" in r.getMessage() for r in caplog.records
    )


def test_table_parts_are_read_only(greetings):
    table = HuffmanTable(greetings)
    for name in ("codes", "weights", "encoder", "decoder", "root"):
        with pytest.raises(AttributeError):
            setattr(table, name, None)
    with pytest.raises(AttributeError):
        table.extra = 1


def test_build_skips_debug_summary_when_disabled(monkeypatch, greetings):
    calls = []
    monkeypatch.setattr(
        huffman.CodeTable, "weighted_length",
        lambda self: calls.append(self) or 0,
    )
    logging.getLogger("huffman").setLevel(logging.INFO)
    try:
        HuffmanTable(greetings)
    finally:
        logging.getLogger("huffman").setLevel(logging.NOTSET)
    assert calls == []
