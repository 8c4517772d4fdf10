#!/usr/bin/env python

import matplotlib.pyplot as plt
import numpy as np

# read lines written by run_benchmark.py. Repeated runs of the same
# case are collected together.

def load_results(filename):

    results = dict()

    with open(filename, 'r') as istr:

        for line in istr:

            line = line.rstrip()

            if not line:
                continue

            name, max_depth, nsym, period = line.split()

            if name not in results:
                results[name] = []

            results[name].append(float(period))

    return results

def main(results_filename='benchmark_results.txt',
         image_filename='benchmark_results.png'):

    results = load_results(results_filename)

    names = list(sorted(results.keys()))

    nnames = len(names)

    positions = np.arange(nnames)
    mean_times = np.zeros(nnames)
    errs = np.zeros((2, nnames))

    fig = plt.figure()

    plt.grid(color=[.9, .9, .9], zorder=-1, linewidth=.5)

    for nidx, name in enumerate(names):
        result_data = np.array(results[name]) * 1e6
        mtime = np.power(result_data.prod(), 1.0/len(result_data))
        mean_times[nidx] = mtime
        errs[0, nidx] = max(mtime - result_data.min(), 0)
        errs[1, nidx] = max(result_data.max() - mtime, 0)

        unit = 'μs'
        if mtime < 1:
            mtime *= 1e3
            unit = 'ns'
        print('{} {:.4g} {}'.format(name, mtime, unit))

    plt.errorbar(positions,
                 mean_times, errs, fmt='.', capsize=2,
                 color='b', ecolor='k',
                 elinewidth=0.5, zorder=1,
                 barsabove=True)

    plt.xticks(positions, names, rotation=45, ha='right')
    plt.ylabel('μs / symbol')
    plt.title('L-System expansion benchmark')

    plt.gca().set_axisbelow(True)

    plt.yscale('log')

    plt.tight_layout()
    plt.savefig(image_filename, dpi=300)
    plt.close(fig)

    print('wrote {}'.format(image_filename))

if __name__ == '__main__':
    main()
