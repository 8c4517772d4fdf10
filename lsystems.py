#!/usr/bin/env python
######################################################################
#
# lsystems.py
#
######################################################################
#
# Based on documentation in https://en.wikipedia.org/wiki/L-system and
# http://paulbourke.net/fractals/lsys/
#
# This version expands L-Systems generation by generation using a
# pair of FIFO queues, so symbols produced during one pass are never
# re-expanded until the next pass. Sequence lengths can be predicted
# ahead of time from the growth matrix of the rules.

import argparse
from datetime import datetime
from collections import deque, namedtuple
import numpy as np

from plot_growth import plot_growth

LSystem = namedtuple('LSystem', 'start, rules, turn_angle_deg')

# A few L-Systems found on pages linked above. The turn angle is
# carried along for renderers but plays no part in expansion.

KNOWN_LSYSTEMS = {

    'sierpinski_triangle': LSystem(
        start = 'F-G-G',
        rules = dict(F='F-G+F+G-F', G='GG'),
        turn_angle_deg = 120
    ),

    'sierpinski_arrowhead': LSystem(
        start = 'A',
        rules = dict(A='B-A-B', B='A+B+A'),
        turn_angle_deg = 60
    ),

    'dragon_curve': LSystem(
        start = 'FX',
        rules = dict(X='X+YF+', Y='-FX-Y'),
        turn_angle_deg = 90
    ),

    'barnsley_fern': LSystem(
        start = 'X',
        rules = dict(X='F+[[X]-X]-F[-FX]+X', F='FF'),
        turn_angle_deg = 25
    ),

    'sticks': LSystem(
        start = 'X',
        rules = dict(X='F[+X]F[-X]+X', F='FF'),
        turn_angle_deg = 20
    ),

    'hilbert': LSystem(
        start = 'L',
        rules = dict(L='+RF-LFL-FR+', R='-LF+RFR+FL-'),
        turn_angle_deg = 90
    ),

    'pentaplexity': LSystem(
        start = 'F++F++F++F++F',
        rules = dict(F='F++F++F+++++F-F++F'),
        turn_angle_deg = 36
    ),

    'fibonacci_word': LSystem(
        start = 'A',
        rules = dict(A='AB', B='A'),
        turn_angle_deg = 0
    ),

    'plant': LSystem(
        start = 'X',
        rules = dict(X='F[+X]F[-X]+X'),
        turn_angle_deg = 25
    )

}

######################################################################
# errors raised while building or expanding an L-System

class LSystemError(Exception):
    pass

class MalformedRuleInput(LSystemError, ValueError):
    pass

class NonNumericInput(LSystemError, ValueError):
    pass

class NegativeIterations(LSystemError, ValueError):
    pass

class SequenceTooLong(LSystemError):
    pass

def _check_iterations(iterations):
    if iterations < 0:
        raise NegativeIterations(
            'iteration count must be >= 0, got {}'.format(iterations))

######################################################################
# turn a rule string like 'XF[+X]F[-X]+X' into a (symbol, replacement)
# pair. The first character is the symbol, everything after it is the
# replacement, which may be empty.

def lsys_parse_rule(text):

    if not text:
        raise MalformedRuleInput('rule has no symbol to define')

    return text[0], text[1:]

######################################################################
# build a ruleset from rule strings; later definitions of a symbol
# overwrite earlier ones.

def lsys_build_rules(rule_strings):

    rules = dict()

    for text in rule_strings:
        symbol, replacement = lsys_parse_rule(text)
        rules[symbol] = replacement

    return rules

######################################################################
# the replacement for a symbol, or the symbol itself if no rule
# exists for it

def lsys_replacement(rules, symbol):

    if symbol in rules:
        return rules[symbol]

    return symbol

######################################################################
# expand an axiom over the given number of generations.
#
# Only alphabetic symbols are rewritten; punctuation such as + - [ ]
# is copied through even if the rules mention it. If max_length is
# given, the length of every generation is predicted first and
# SequenceTooLong is raised before any expansion happens.

def lsys_expand(axiom, rules, iterations, max_length=None):

    _check_iterations(iterations)

    if max_length is not None:

        lengths = lsys_generation_lengths(axiom, rules, iterations)
        longest = max(lengths)

        if longest > max_length:
            raise SequenceTooLong(
                'expansion would reach {} symbols (limit {})'.format(
                    longest, max_length))

    queue = deque(axiom)

    for i in range(iterations):

        next_queue = deque()

        while queue:

            symbol = queue.popleft()

            if symbol.isalpha():
                next_queue.extend(lsys_replacement(rules, symbol))
            else:
                next_queue.append(symbol)

        queue = next_queue

    return ''.join(queue)

######################################################################
# growth matrix of a ruleset: entry (i, j) counts how many copies of
# alphabet[j] one rewrite of alphabet[i] produces. Non-alphabetic
# symbols and symbols without rules map to themselves.
#
# The matrix has object dtype so that counts stay exact Python ints
# no matter how large they get.

def lsys_growth_matrix(axiom, rules):

    alphabet = set(axiom)

    for symbol, replacement in rules.items():
        alphabet.add(symbol)
        alphabet.update(replacement)

    alphabet = sorted(alphabet)
    index = dict((symbol, i) for i, symbol in enumerate(alphabet))

    matrix = np.zeros((len(alphabet), len(alphabet)), dtype=object)

    for i, symbol in enumerate(alphabet):

        if symbol.isalpha():
            for produced in lsys_replacement(rules, symbol):
                matrix[i, index[produced]] += 1
        else:
            matrix[i, i] = 1

    return alphabet, matrix

######################################################################
# lengths of generations 0 through iterations, computed from symbol
# counts alone without building any strings

def lsys_generation_lengths(axiom, rules, iterations):

    _check_iterations(iterations)

    alphabet, matrix = lsys_growth_matrix(axiom, rules)
    index = dict((symbol, i) for i, symbol in enumerate(alphabet))

    counts = np.zeros(len(alphabet), dtype=object)

    for symbol in axiom:
        counts[index[symbol]] += 1

    lengths = [len(axiom)]

    for i in range(iterations):
        counts = counts.dot(matrix)
        lengths.append(int(counts.sum()))

    return np.array(lengths, dtype=object)

######################################################################
# parse command-line options for this program

def parse_options():

    parser = argparse.ArgumentParser(
        description='simple Python L-system expander')

    parser.add_argument('lname', metavar='LSYSTEM', nargs=1,
                        help='name of desired L-system',
                        type=str,
                        choices=KNOWN_LSYSTEMS)

    parser.add_argument('max_depth', metavar='MAXDEPTH', nargs=1,
                        help='number of generations to expand', type=int)

    parser.add_argument('-x', dest='max_length', metavar='MAXLENGTH',
                        type=int, default=100000,
                        help='maximum number of symbols to expand '
                        '(negative for no limit)')

    parser.add_argument('-l', dest='lengths_only', action='store_true',
                        help='only print the length of each generation')

    parser.add_argument('-t', dest='text_lengths', action='store_true',
                        help='write generation lengths to lengths.txt')

    parser.add_argument('-p', dest='plot', action='store_true',
                        help='plot generation lengths to a PNG')

    opts = parser.parse_args()

    opts.lname = opts.lname[0]
    opts.max_depth = opts.max_depth[0]

    if opts.max_depth < 0:
        parser.error('MAXDEPTH must be >= 0')

    opts.lsys = KNOWN_LSYSTEMS[opts.lname]

    return opts

######################################################################
# main function

def main():

    opts = parse_options()

    lsys = opts.lsys

    lengths = lsys_generation_lengths(lsys.start, lsys.rules, opts.max_depth)

    if opts.text_lengths:
        with open('lengths.txt', 'w') as ostr:
            for length in lengths:
                ostr.write('{}\n'.format(length))
        print('wrote lengths.txt')

    if opts.plot:
        plot_growth(lengths, title=opts.lname)

    if opts.lengths_only:
        for depth, length in enumerate(lengths):
            print(depth, length)
        return

    max_length = None if opts.max_length < 0 else opts.max_length

    # time expansion
    start = datetime.now()

    try:
        lstring = lsys_expand(lsys.start, lsys.rules, opts.max_depth,
                              max_length=max_length)
    except SequenceTooLong as e:
        print('...{}, skipping output!'.format(e))
        return

    # print elapsed time
    elapsed = (datetime.now() - start).total_seconds()

    print('generated {} symbols in {:.6f} s ({:.3f} us/symbol)'.format(
        len(lstring), elapsed, 1e6 * elapsed/max(len(lstring), 1)))

    print(lstring)

if __name__ == '__main__':
    main()
