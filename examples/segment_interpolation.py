"""
.. module:: segment_interpolation

    :synopsis: Example code interpolating a polyline with one cubic segment
               per pair of points, using slopes estimated from the
               neighbouring points.

"""

import numpy as np

from cubicseg import SplinePolynomial, show_segment_messages, vec2


def estimate_slopes(points):
    # one-sided differences at the ends, central differences in between
    slopes = []
    for i in range(len(points)):
        a = points[max(i - 1, 0)]
        b = points[min(i + 1, len(points) - 1)]
        slopes.append((b.y - a.y) / (b.x - a.x))
    return slopes


def main():
    show_segment_messages()

    points = [vec2(0, 0), vec2(1, 2), vec2(2.5, 1.5), vec2(4, 3)]
    slopes = estimate_slopes(points)

    segments = [
        SplinePolynomial.from_slopes(points[i], slopes[i], points[i + 1], slopes[i + 1])
        for i in range(len(points) - 1)
    ]

    for start, end, segment in zip(points, points[1:], segments):
        xs = np.linspace(0.0, end.x - start.x, 5)
        ys = start.y + segment.value_at(xs)
        print(f'{segment}: length {segment.approx_length(0.0, end.x - start.x):.3f}')
        for x, y in zip(start.x + xs, ys):
            print(f'    ({x:.3f}, {y:.3f})')


if __name__ == '__main__':
    main()
