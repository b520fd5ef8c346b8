"""Tests for the secure random source."""
import logging
import secrets
from collections import Counter

import pytest

from credgen import random_source
from credgen.errors import CredgenError, EntropySourceUnavailable, InvalidParameters
from credgen.password_gen import generate_password
from credgen.random_source import RandomSource, default_source


class TestNextInt:
    def test_stays_in_range(self):
        for _ in range(500):
            assert 0 <= default_source.next_int(7) < 7

    def test_max_one_is_always_zero(self):
        assert all(default_source.next_int(1) == 0 for _ in range(50))

    def test_roughly_uniform(self):
        counts = Counter(default_source.next_int(4) for _ in range(4000))
        assert set(counts) == {0, 1, 2, 3}
        assert all(count > 800 for count in counts.values())

    @pytest.mark.parametrize("bad", [0, -1, 2.5, "3", True, None])
    def test_rejects_bad_max(self, bad):
        with pytest.raises(InvalidParameters):
            default_source.next_int(bad)

    def test_uses_injected_function(self):
        calls = []

        def randbelow(n):
            calls.append(n)
            return n - 1

        assert RandomSource(randbelow).next_int(10) == 9
        assert calls == [10]


class TestChoice:
    def test_picks_by_index(self, first_source, last_source):
        assert first_source.choice("xyz") == "x"
        assert last_source.choice("xyz") == "z"

    def test_empty_sequence(self):
        with pytest.raises(InvalidParameters):
            default_source.choice("")


class TestShuffle:
    def test_is_a_permutation(self):
        items = list("aabbbcdefg")
        shuffled = default_source.shuffle(items)
        assert sorted(shuffled) == sorted(items)
        assert len(shuffled) == len(items)

    def test_does_not_modify_input(self):
        items = [1, 2, 3, 4, 5]
        default_source.shuffle(items)
        assert items == [1, 2, 3, 4, 5]

    def test_returns_new_list_for_tuples(self):
        assert isinstance(default_source.shuffle((1, 2, 3)), list)

    def test_empty_and_single(self):
        assert default_source.shuffle([]) == []
        assert default_source.shuffle(["x"]) == ["x"]

    def test_fisher_yates_with_fixed_draws(self, first_source):
        # j is always 0: each step swaps position i with the front
        assert first_source.shuffle([1, 2, 3]) == [2, 3, 1]

    def test_all_orders_reachable(self):
        seen = {tuple(default_source.shuffle([1, 2, 3])) for _ in range(600)}
        assert len(seen) == 6


class TestEntropyFailure:
    def test_injected_failure_raises(self, broken_source):
        with pytest.raises(EntropySourceUnavailable):
            broken_source.next_int(10)

    def test_failure_is_a_credgen_error(self, broken_source):
        with pytest.raises(CredgenError):
            broken_source.shuffle([1, 2, 3])

    def test_os_error_from_secrets_propagates(self, monkeypatch):
        def randbelow(n):
            raise OSError("getrandom failed")

        monkeypatch.setattr(random_source.secrets, "randbelow", randbelow)
        with pytest.raises(EntropySourceUnavailable):
            generate_password(12)

    def test_no_fallback_to_random_module(self, monkeypatch):
        import random

        def fail(*args, **kwargs):
            raise AssertionError("random module must never be used")

        monkeypatch.setattr(random, "randrange", fail)
        monkeypatch.setattr(random, "random", fail)
        monkeypatch.setattr(random, "choice", fail)
        assert len(generate_password(20)) == 20

    def test_default_uses_secrets(self, monkeypatch):
        monkeypatch.setattr(secrets, "randbelow", lambda n: 0)
        assert default_source.next_int(100) == 0

    def test_failure_left_to_caller_to_log(self, caplog):
        def randbelow(n):
            raise OSError("no entropy")

        with caplog.at_level(logging.DEBUG, logger="credgen"):
            with pytest.raises(EntropySourceUnavailable):
                generate_password(12, source=RandomSource(randbelow))

        noisy = [
            r for r in caplog.records
            if r.name.startswith("credgen") and r.levelno >= logging.WARNING
        ]
        assert noisy == []
