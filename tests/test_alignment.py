from reading_practice.alignment import index_words, match_transcript, normalize_spoken_token, split_words


def test_index_words_repeated_words_resolve_to_successive_occurrences():
    words = index_words("the cat the dog")
    assert [w.text for w in words] == ["the", "cat", "the", "dog"]
    assert [w.start_offset for w in words] == [0, 4, 8, 12]
    assert [w.index for w in words] == [0, 1, 2, 3]


def test_index_words_handles_irregular_whitespace():
    text = "  Hello,   world.\n\tBye!"
    words = index_words(text)
    assert [w.text for w in words] == ["Hello,", "world.", "Bye!"]
    for w in words:
        assert text[w.start_offset:w.start_offset + len(w.text)] == w.text


def test_index_words_offsets_non_decreasing_with_substring_words():
    # "a" occurs inside "cat" before the standalone "a"
    words = index_words("cat a a")
    offsets = [w.start_offset for w in words]
    assert offsets == sorted(offsets)
    assert offsets == [0, 4, 6]


def test_index_words_empty_text():
    assert index_words("") == []
    assert index_words("   \n ") == []
    assert split_words(" ") == []


def test_normalize_strips_only_sentence_punctuation():
    assert normalize_spoken_token("Hello,") == "hello"
    assert normalize_spoken_token("Why?!") == "why"
    assert normalize_spoken_token("don't") == "don't"
    assert normalize_spoken_token("well-known;") == "well-known;"


def test_identical_transcript_matches_every_word():
    text = "The quick brown fox. It jumped, and ran!"
    words = index_words(text)
    assert match_transcript(words, text.upper()) == set(range(len(words)))


def test_matching_respects_word_order():
    words = index_words("the cat sat on the mat")
    # "mat" first moves the pointer to the end; the rest cannot match behind it
    assert match_transcript(words, "mat the cat") == {5}


def test_repeating_a_common_word_matches_successive_occurrences_only():
    words = index_words("the cat the dog")
    assert match_transcript(words, "the the the the") == {0, 2}


def test_unmatched_tokens_are_skipped():
    words = index_words("Ali went to the market")
    assert match_transcript(words, "um Ali uh went erm to the market") == {0, 1, 2, 3, 4}


def test_empty_transcript_matches_nothing():
    words = index_words("Ali went to the market")
    assert match_transcript(words, "") == set()
    assert match_transcript(words, "   ") == set()


def test_matched_count_grows_as_ordered_tokens_are_appended():
    text = "Ali went to the market and bought fresh bread"
    words = index_words(text)
    spoken = text.lower().split()
    counts = [len(match_transcript(words, " ".join(spoken[:n]))) for n in range(len(spoken) + 1)]
    assert counts == sorted(counts)
    assert counts[-1] == len(words)
