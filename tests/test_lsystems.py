import sys

import numpy as np
import pytest

import lsystems
from lsystems import (KNOWN_LSYSTEMS, MalformedRuleInput, NegativeIterations,
                      SequenceTooLong, lsys_build_rules, lsys_expand,
                      lsys_generation_lengths, lsys_growth_matrix,
                      lsys_parse_rule, lsys_replacement)

PLANT_RULE = 'F[+X]F[-X]+X'


class TestExpand:

    def test_zero_iterations_is_identity(self):
        for name, lsys in KNOWN_LSYSTEMS.items():
            assert lsys_expand(lsys.start, lsys.rules, 0) == lsys.start

    def test_empty_ruleset_is_identity(self):
        for n in range(5):
            assert lsys_expand('F+F-[X]', {}, n) == 'F+F-[X]'

    def test_empty_axiom(self):
        assert lsys_expand('', dict(A='AB'), 4) == ''

    def test_punctuation_passes_through(self):
        assert lsys_expand('F+F-F', dict(F='F+F'), 1) == 'F+F+F+F-F+F'

    def test_rules_for_punctuation_are_ignored(self):
        rules = {'F': 'FF', '+': '-', '[': 'X'}
        assert lsys_expand('F+[F]', rules, 1) == 'FF+[FF]'

    def test_fibonacci_word(self):
        rules = dict(A='AB', B='A')
        assert lsys_expand('A', rules, 1) == 'AB'
        assert lsys_expand('A', rules, 2) == 'ABA'
        assert lsys_expand('A', rules, 3) == 'ABAAB'

    def test_fibonacci_word_lengths(self):
        rules = dict(A='AB', B='A')
        fib = [1, 2, 3, 5, 8, 13, 21, 34, 55]
        for n, expected in enumerate(fib):
            assert len(lsys_expand('A', rules, n)) == expected

    def test_produced_symbols_wait_for_next_generation(self):
        # A produces B, which must not be rewritten until the next pass
        rules = dict(A='B', B='C')
        assert lsys_expand('A', rules, 1) == 'B'
        assert lsys_expand('A', rules, 2) == 'C'

    def test_orphan_rule_has_no_effect(self):
        rules = dict(A='AB', B='A')
        with_orphan = dict(rules, Q='QQQQ')
        for n in range(6):
            assert (lsys_expand('A+B', with_orphan, n) ==
                    lsys_expand('A+B', rules, n))

    def test_length_growth_bound(self):
        lsys = KNOWN_LSYSTEMS['barnsley_fern']
        k = max(len(r) for r in lsys.rules.values())
        for n in range(4):
            lstring = lsys_expand(lsys.start, lsys.rules, n)
            assert len(lstring) <= len(lsys.start) * k**n

    def test_fixed_points(self):
        rules = dict(A='A', B='B')
        for n in range(5):
            assert lsys_expand('AB-CA', rules, n) == 'AB-CA'

    def test_empty_replacement_deletes(self):
        assert lsys_expand('AXBX', dict(X=''), 1) == 'AB'

    def test_plant(self):
        rules = lsys_build_rules(['X' + PLANT_RULE])
        once = lsys_expand('X', rules, 1)
        assert once == PLANT_RULE
        twice = lsys_expand('X', rules, 2)
        assert twice == PLANT_RULE.replace('X', PLANT_RULE)
        assert twice == 'F[+F[+X]F[-X]+X]F[-F[+X]F[-X]+X]+F[+X]F[-X]+X'

    def test_rules_not_mutated(self):
        rules = dict(A='AB', B='A')
        lsys_expand('A', rules, 5)
        assert rules == dict(A='AB', B='A')

    def test_negative_iterations_rejected(self):
        with pytest.raises(NegativeIterations):
            lsys_expand('A', dict(A='AB'), -1)

    def test_max_length(self):
        rules = dict(A='AB', B='A')
        assert lsys_expand('A', rules, 4, max_length=8) == 'ABAABABA'
        with pytest.raises(SequenceTooLong):
            lsys_expand('A', rules, 5, max_length=8)

    def test_max_length_checks_every_generation(self):
        # grows to 4 symbols, then everything is deleted
        rules = dict(A='BBBB', B='')
        assert lsys_expand('A', rules, 2) == ''
        with pytest.raises(SequenceTooLong):
            lsys_expand('A', rules, 2, max_length=3)


class TestRules:

    def test_parse_rule(self):
        assert lsys_parse_rule('XF[+X]') == ('X', 'F[+X]')
        assert lsys_parse_rule('X') == ('X', '')

    def test_parse_empty_rule(self):
        with pytest.raises(MalformedRuleInput):
            lsys_parse_rule('')

    def test_later_rule_overwrites(self):
        rules = lsys_build_rules(['AAB', 'BA', 'AC'])
        assert rules == dict(A='C', B='A')

    def test_replacement_defaults_to_symbol(self):
        rules = dict(A='AB')
        assert lsys_replacement(rules, 'A') == 'AB'
        assert lsys_replacement(rules, 'Z') == 'Z'


class TestGrowth:

    def test_growth_matrix(self):
        alphabet, matrix = lsys_growth_matrix('A', {'A': 'AB', 'B': 'A', '+': 'AA'})
        assert alphabet == ['+', 'A', 'B']
        expected = np.array([[1, 0, 0],
                             [0, 1, 1],
                             [0, 1, 0]])
        assert (matrix == expected).all()

    def test_lengths_match_expansion(self):
        for name, lsys in KNOWN_LSYSTEMS.items():
            lengths = lsys_generation_lengths(lsys.start, lsys.rules, 4)
            assert len(lengths) == 5
            for n, length in enumerate(lengths):
                assert length == len(lsys_expand(lsys.start, lsys.rules, n))

    def test_lengths_stay_exact(self):
        lengths = lsys_generation_lengths('A', dict(A='AA'), 100)
        assert lengths[-1] == 2**100

    def test_lengths_empty(self):
        assert list(lsys_generation_lengths('', {}, 3)) == [0, 0, 0, 0]

    def test_lengths_negative(self):
        with pytest.raises(NegativeIterations):
            lsys_generation_lengths('A', {}, -2)


class TestMain:

    def _run(self, monkeypatch, *args):
        monkeypatch.setattr(sys, 'argv', ['lsystems.py'] + list(args))
        lsystems.main()

    def test_prints_expansion(self, monkeypatch, capsys):
        self._run(monkeypatch, 'fibonacci_word', '3')
        out = capsys.readouterr().out.splitlines()
        assert out[0].startswith('generated 5 symbols in')
        assert out[-1] == 'ABAAB'

    def test_lengths_only(self, monkeypatch, capsys):
        self._run(monkeypatch, 'fibonacci_word', '4', '-l')
        out = capsys.readouterr().out.splitlines()
        assert out == ['0 1', '1 2', '2 3', '3 5', '4 8']

    def test_skips_long_output(self, monkeypatch, capsys):
        self._run(monkeypatch, 'dragon_curve', '20', '-x', '1000')
        out = capsys.readouterr().out
        assert 'skipping output' in out
        assert 'generated' not in out

    def test_writes_lengths_and_plot(self, monkeypatch, capsys, tmp_path):
        monkeypatch.chdir(tmp_path)
        self._run(monkeypatch, 'plant', '3', '-l', '-t', '-p')
        lines = (tmp_path / 'lengths.txt').read_text().split()
        assert lines == ['1', '12', '45', '144']
        assert (tmp_path / 'growth_plot.png').exists()

    def test_negative_depth(self, monkeypatch):
        with pytest.raises(SystemExit):
            self._run(monkeypatch, 'plant', '-1')
