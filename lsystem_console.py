#!/usr/bin/env python
######################################################################
#
# lsystem_console.py
#
######################################################################
#
# Interactive front end for lsystems.py: prompts for an angle, a
# starting pattern, a list of rules and an iteration count, then
# prints the expanded string.
#
# Each rule is typed as the symbol followed directly by its
# replacement, so 'XF[+X]F[-X]+X' defines X -> F[+X]F[-X]+X.

import sys
import argparse

from lsystems import (LSystem, LSystemError, NonNumericInput,
                      NegativeIterations, lsys_build_rules, lsys_expand)

######################################################################
# write a prompt and read back one line, without its line ending

def _prompt(infile, outfile, text):

    if outfile is not None:
        outfile.write(text)
        outfile.flush()

    line = infile.readline()

    if not line:
        raise LSystemError('unexpected end of input after ' + repr(text))

    return line.rstrip('\r\n')

def _read_number(infile, outfile, text, convert, what):

    field = _prompt(infile, outfile, text).strip()

    try:
        return convert(field)
    except ValueError:
        raise NonNumericInput('{} must be a number, got {!r}'.format(
            what, field))

######################################################################
# read everything needed for one run. Returns an LSystem and the
# number of iterations to expand it.

def read_parameters(infile, outfile=None):

    angle = _read_number(infile, outfile, 'Enter angle: ',
                         float, 'angle')

    start = _prompt(infile, outfile, 'Enter starting pattern: ')

    num_rules = _read_number(infile, outfile, 'Enter the number of rules: ',
                             int, 'rule count')

    if num_rules < 0:
        raise NonNumericInput(
            'rule count must be >= 0, got {}'.format(num_rules))

    rule_strings = []

    for i in range(1, num_rules + 1):
        rule_strings.append(
            _prompt(infile, outfile, 'Enter Rule {}: '.format(i)))

    rules = lsys_build_rules(rule_strings)

    iterations = _read_number(infile, outfile,
                              'Enter the number of expansions: ',
                              int, 'iteration count')

    if iterations < 0:
        raise NegativeIterations(
            'iteration count must be >= 0, got {}'.format(iterations))

    lsys = LSystem(start=start, rules=rules, turn_angle_deg=angle)

    return lsys, iterations

######################################################################
# parse command-line options for this program

def parse_options(argv=None):

    parser = argparse.ArgumentParser(
        description='expand an L-System typed in at the console')

    parser.add_argument('-q', dest='quiet', action='store_true',
                        help='do not print prompts')

    parser.add_argument('-x', dest='max_length', metavar='MAXLENGTH',
                        type=int, default=-1,
                        help='maximum number of symbols to expand '
                        '(negative for no limit)')

    return parser.parse_args(argv)

######################################################################
# main function

def main(argv=None, infile=None, outfile=None):

    opts = parse_options(argv)

    infile = sys.stdin if infile is None else infile
    outfile = sys.stdout if outfile is None else outfile

    max_length = None if opts.max_length < 0 else opts.max_length

    try:

        lsys, iterations = read_parameters(
            infile, None if opts.quiet else outfile)

        lstring = lsys_expand(lsys.start, lsys.rules, iterations,
                              max_length=max_length)

    except LSystemError as e:
        sys.stderr.write('error: {}\n'.format(e))
        return 1

    outfile.write('Resulting characters after {} expansions: {}\n'.format(
        iterations, lstring))

    return 0

if __name__ == '__main__':
    sys.exit(main())
