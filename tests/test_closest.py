import math
import random

import pytest

from algolab.closest import Point, brute_force, closest_pair, main, read_points


def _random_points(seed, count, span):
    rng = random.Random(seed)
    unique = set()
    while len(unique) < count:
        unique.add((rng.randint(-span, span), rng.randint(-span, span)))
    return [Point(x, y) for x, y in unique]


def test_distance_is_symmetric_and_zero_to_self():
    a, b = Point(-3, 8), Point(12, -1)
    assert a.distance_to(b) == b.distance_to(a)
    assert a.distance_to(a) == 0.0


def test_distance_pythagorean():
    assert Point(0, 0).distance_to(Point(3, 4)) == 5.0


def test_brute_force_finds_minimum():
    points = _random_points(1, 30, 100)
    (p, q), dist = brute_force(points)
    assert p.distance_to(q) == dist
    assert all(a.distance_to(b) >= dist for a in points for b in points if a != b)


def test_brute_force_needs_two_points():
    with pytest.raises(ValueError):
        brute_force([Point(1, 1)])


@pytest.mark.parametrize("threshold", [1, 2, 3, 5, 50])
@pytest.mark.parametrize("seed", range(6))
def test_closest_pair_matches_brute_force(seed, threshold):
    points = _random_points(seed, 60, 10000)
    _, expected = brute_force(points)
    p, q = closest_pair(points, threshold)
    assert p.distance_to(q) == expected
    assert p in points and q in points and p != q


@pytest.mark.parametrize("threshold", [1, 2, 3])
def test_closest_pair_with_shared_x_coordinates(threshold):
    rng = random.Random(42)
    points = list({Point(rng.randint(0, 3), rng.randint(-500, 500)) for _ in range(40)})
    _, expected = brute_force(points)
    p, q = closest_pair(points, threshold)
    assert p.distance_to(q) == expected


def test_closest_pair_rejects_bad_threshold():
    with pytest.raises(ValueError):
        closest_pair([Point(0, 0), Point(1, 1)], 0)


def test_closest_pair_needs_two_points():
    with pytest.raises(ValueError):
        closest_pair([Point(0, 0)], 3)


def test_read_points(tmp_path):
    path = tmp_path / "p.txt"
    path.write_text("3\n1 2\n-5 7\n0 0\n")
    assert read_points(path) == [Point(1, 2), Point(-5, 7), Point(0, 0)]


def test_read_points_short_file(tmp_path):
    path = tmp_path / "p.txt"
    path.write_text("3\n1 2\n")
    with pytest.raises(ValueError):
        read_points(path)


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "p.txt"
    path.write_text("3\n0 0\n10 10\n1 1\n")
    assert main([str(path), "2"]) == 0
    out = capsys.readouterr().out
    assert "Total points: 3" in out
    assert "Brute force threshold: 2" in out
    assert "Closest pair: (0, 0) and (1, 1)" in out
    assert f"Minimum distance: {math.sqrt(2):g}" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt"), "3"]) == 1
    assert "Cannot open file" in capsys.readouterr().err