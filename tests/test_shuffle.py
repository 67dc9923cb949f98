from cardpack.cards import jokers, new, seeded_shuffle, shuffle

from .helpers import same_cards


def test_shuffle_is_a_permutation_of_the_deck():
    cards = new(shuffle)
    assert len(cards) == 52
    assert same_cards(cards, new())


def test_shuffle_returns_new_list_and_leaves_input_alone():
    cards = new()
    original = list(cards)
    shuffled = shuffle(cards)
    assert shuffled is not cards
    assert cards == original
    assert same_cards(shuffled, original)


def test_shuffle_keeps_jokers():
    cards = new(jokers(2), shuffle)
    assert same_cards(cards, new(jokers(2)))


def test_shuffle_empty_deck():
    assert shuffle([]) == []


def test_back_to_back_shuffles_do_not_repeat():
    # All five calls land in the same wall-clock second; each draws its own seed.
    results = {tuple(new(shuffle)) for _ in range(5)}
    assert len(results) > 1


def test_seeded_shuffle_is_reproducible():
    assert new(seeded_shuffle(777)) == new(seeded_shuffle(777))
    assert new(seeded_shuffle(777)) != new(seeded_shuffle(778))


def test_seeded_shuffle_leaves_input_alone():
    cards = new()
    shuffled = seeded_shuffle(3)(cards)
    assert cards == new()
    assert same_cards(shuffled, cards)
