from furigana_ruby.utils.text import advance_bytes, byte_offset, char_index, utf8_length


def test_utf8_length():
    assert [utf8_length(ch) for ch in "aé猫😀"] == [1, 2, 3, 4]


def test_byte_offset_and_char_index_agree():
    text = "a猫b😀c"
    for index in range(len(text) + 1):
        assert char_index(text, byte_offset(text, index)) == index


def test_char_index_rounds_up_inside_a_character():
    assert char_index("a猫b", 2) == 2


def test_advance_bytes_consumes_whole_characters_and_clamps():
    assert advance_bytes("猫が", 0, 3) == 1
    assert advance_bytes("猫が", 0, 4) == 2
    assert advance_bytes("猫", 0, 100) == 1
    assert advance_bytes("a猫", 1, 0) == 1
