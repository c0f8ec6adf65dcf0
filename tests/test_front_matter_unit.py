from tinyspec.infrastructure.front_matter import front_matter_title, parse_front_matter, split_front_matter


def test_title_from_front_matter():
    assert front_matter_title("---\ntitle: Hello World\n---\n# Body\n") == "Hello World"


def test_missing_front_matter():
    assert split_front_matter("# Just a heading\n") is None
    assert front_matter_title("# Just a heading\n") is None


def test_unterminated_front_matter_is_absent():
    assert split_front_matter("---\ntitle: x\n") is None


def test_malformed_yaml_is_absent():
    assert parse_front_matter("---\ntitle: [unclosed\n---\n") is None
    assert front_matter_title("---\ntitle: [unclosed\n---\n") is None


def test_non_mapping_front_matter_is_absent():
    assert parse_front_matter("---\n- a\n- b\n---\n") is None


def test_non_string_title_is_stringified():
    assert front_matter_title("---\ntitle: 42\n---\n") == "42"


def test_blank_title_is_absent():
    assert front_matter_title("---\ntitle: ''\n---\n") is None
