#!/usr/bin/env python

from datetime import datetime

from lsystems import KNOWN_LSYSTEMS, lsys_expand

TEST_CASES = [
    ('sierpinski_arrowhead', 12),
    ('sierpinski_triangle', 11),
    ('dragon_curve', 18),
    ('barnsley_fern', 9),
    ('sticks', 11),
    ('hilbert', 9),
    ('pentaplexity', 6),
    ('fibonacci_word', 25)
]

# time expansion of each (name, depth) test case and append one line
# per case to ostr: name, depth, symbol count, seconds per symbol

def run_cases(test_cases, ostr):

    first = True

    for name, max_depth in test_cases:

        lsys = KNOWN_LSYSTEMS[name]

        print(name, max_depth)

        if first:
            print('throwing away first run...')
            lsys_expand(lsys.start, lsys.rules, max_depth)
            first = False

        start = datetime.now()
        lstring = lsys_expand(lsys.start, lsys.rules, max_depth)
        elapsed = (datetime.now() - start).total_seconds()

        nsym = len(lstring)
        period = elapsed / max(nsym, 1)

        print('generated {} symbols in {:.6f} s'.format(nsym, elapsed))

        ostr.write('{} {} {} {}\n'.format(name, max_depth, nsym, repr(period)))
        ostr.flush()

def main():

    with open('benchmark_results.txt', 'a') as ostr:
        run_cases(TEST_CASES, ostr)

if __name__ == '__main__':
    main()
