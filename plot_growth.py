import numpy as np
import matplotlib.pyplot as plt

# plot the number of symbols in each generation of an L-System.
# lengths grow exponentially for most rulesets, so the y axis is
# logarithmic whenever every length is positive.

def plot_growth(lengths, image_filename='growth_plot.png', title=None):

    lengths = np.array([float(length) for length in lengths])

    assert len(lengths.shape) == 1 and len(lengths) > 0

    generations = np.arange(len(lengths))

    fig = plt.figure()

    plt.grid(color=[.9, .9, .9], zorder=-1, linewidth=.5)
    plt.plot(generations, lengths, '.-', color='b', zorder=2)

    if np.all(lengths > 0):
        plt.yscale('log')

    plt.xlabel('generation')
    plt.ylabel('symbols')
    plt.title(title or 'L-System growth')

    plt.gca().set_axisbelow(True)

    plt.savefig(image_filename)
    plt.close(fig)

    print('wrote {}'.format(image_filename))


if __name__ == '__main__':

    lengths = np.atleast_1d(np.genfromtxt('lengths.txt'))

    plot_growth(lengths)
