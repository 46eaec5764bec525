from algolab.puzzle import BLANK, END_STATE, START_STATE, format_path, format_state, neighbors


def test_format_state_layout():
    assert format_state("123456 78") == "1 2 3 \n4 5 6 \n  7 8 \n\n"


def test_format_path_concatenates_states():
    path = [START_STATE, END_STATE]
    assert format_path(path) == format_state(START_STATE) + format_state(END_STATE)


def test_format_path_empty():
    assert format_path([]) == ""


def test_neighbors_of_corner_blank():
    assert len(list(neighbors(END_STATE))) == 2


def test_neighbors_of_center_blank():
    assert len(list(neighbors(START_STATE))) == 4


def test_neighbors_swap_exactly_one_tile_with_blank():
    for nxt in neighbors(START_STATE):
        diff = [i for i, (a, b) in enumerate(zip(START_STATE, nxt)) if a != b]
        assert len(diff) == 2
        assert sorted(nxt) == sorted(START_STATE)
        assert BLANK in (START_STATE[diff[0]], START_STATE[diff[1]])


def test_neighbors_are_symmetric():
    for nxt in neighbors(START_STATE):
        assert START_STATE in set(neighbors(nxt))


def test_neighbors_follow_move_order():
    # blank at index 4: right, down, left, up
    moved = [state.index(BLANK) for state in neighbors(START_STATE)]
    assert moved == [5, 7, 3, 1]