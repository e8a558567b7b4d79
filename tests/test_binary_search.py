import csv
import math
import random

import pytest

from algodemos.binary_search import (
    CSV_HEADER,
    analyse_performance,
    binary_search,
    generate_random_numbers,
    main,
    perform_search,
)


def test_finds_every_element():
    values = [1, 3, 5, 7, 9, 11]
    for value in values:
        index = binary_search(values, value)
        assert values[index] == value


def test_missing_and_empty():
    assert binary_search([1, 3, 5], 4) is None
    assert binary_search([1, 3, 5], 0) is None
    assert binary_search([1, 3, 5], 6) is None
    assert binary_search([], 1) is None


def test_duplicates_return_first_probe():
    assert binary_search([2, 2, 2, 2, 2], 2) == 2


def test_random_lists_agree_with_membership():
    rng = random.Random(7)
    for _ in range(50):
        values = sorted(rng.randint(0, 30) for _ in range(rng.randint(0, 20)))
        target = rng.randint(-2, 32)
        result = binary_search(values, target)
        if target in values:
            assert values[result] == target
        else:
            assert result is None


def test_generate_random_numbers_bounds_and_seed():
    first = generate_random_numbers(200, 1, 1000, random.Random(1))
    second = generate_random_numbers(200, 1, 1000, random.Random(1))
    assert first == second
    assert len(first) == 200
    assert all(1 <= n <= 1000 for n in first)


def test_analyse_performance_writes_csv(tmp_path):
    path = tmp_path / "out.csv"
    rows = analyse_performance(path, (100, 500), random.Random(2))
    assert [row.size for row in rows] == [100, 500]
    with open(path, newline="") as handle:
        lines = list(csv.reader(handle))
    assert tuple(lines[0]) == CSV_HEADER
    assert [line[0] for line in lines[1:]] == ["100", "500"]
    for line in lines[1:]:
        assert float(line[4]) == pytest.approx(math.log2(int(line[0])), rel=1e-5)
        assert all(int(field) >= 0 for field in line[1:4])


def test_analyse_performance_rejects_non_positive(tmp_path):
    with pytest.raises(ValueError):
        analyse_performance(tmp_path / "x.csv", (0,), random.Random(0))


def _scripted(answers):
    prompts = []
    it = iter(answers)

    def read(prompt):
        prompts.append(prompt)
        return next(it)

    return read, prompts


def test_perform_search_finds_generated_value():
    expected = sorted(generate_random_numbers(5, rng=random.Random(3)))
    read, _ = _scripted(["5", str(expected[0])])
    output = []
    result = perform_search(read, output.append, random.Random(3))
    assert output[0] == "Sorted Array: " + "".join(f"{n} " for n in expected)
    assert expected[result] == expected[0]
    assert output[1] == f"Element {expected[0]} found at index {result}"


def test_perform_search_reprompts_and_reports_missing():
    read, prompts = _scripted(["-2", "abc", "3", "5000"])
    output = []
    assert perform_search(read, output.append, random.Random(4)) is None
    assert prompts.count("Please enter a positive number: ") == 2
    assert output[-1] == "Element 5000 not found in the array."


def test_main_menu(monkeypatch, capsys):
    answers = iter(["x", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Invalid choice. Please try again." in out
    assert "Exiting the program." in out