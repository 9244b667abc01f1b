from spelltrie.spellcheck.variations import (
    clear_suggestions,
    deletes,
    generate_variations,
    inserts,
    replaces,
    transposes,
)


def test_edit_families_for_cat_have_expected_sizes() -> None:
    assert deletes("cat") == ["at", "ct", "ca"]
    assert transposes("cat") == ["act", "cta"]
    assert len(replaces("cat")) == 3 * 26
    assert len(inserts("cat")) == 4 * 26


def test_replaces_include_the_unchanged_word() -> None:
    assert replaces("cat").count("cat") == 3
    assert replaces("cat")[:2] == ["aat", "bat"]


def test_inserts_cover_both_ends() -> None:
    candidates = inserts("cat")
    assert candidates[0] == "acat"
    assert candidates[-1] == "catz"


def test_transposes_of_single_letter_is_empty() -> None:
    assert transposes("a") == []


def test_generate_variations_stops_on_zero_depth_or_empty_word() -> None:
    assert generate_variations("cat", 0) == []
    assert generate_variations("", 2) == []


def test_generate_variations_depth_one_is_deduplicated_in_family_order() -> None:
    variations = generate_variations("cat", 1)

    assert len(variations) == len(set(variations))
    assert variations[:5] == ["at", "ct", "ca", "act", "cta"]
    assert "cat" in variations
    assert "bat" in variations
    assert "cart" in variations


def test_generate_variations_depth_two_reaches_two_edits() -> None:
    one = generate_variations("word", 1)
    two = generate_variations("word", 2)

    assert "wd" not in one
    assert "wd" in two
    assert two[: len(one)] == one
    assert len(two) == len(set(two))


def test_clear_suggestions_keeps_first_seen_order() -> None:
    assert clear_suggestions(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
