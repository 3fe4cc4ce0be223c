"""
ex02_unit_vectors_plot.py
-------------------------
Goal: Visualize 2D vectors next to their unit vectors.
Every unit vector should end on the unit circle.
"""
import numpy as np
import matplotlib.pyplot as plt

from snapvector import EuclideanVector


def run_unit_vector_plot():
    vectors = [
        EuclideanVector.from_iterable([3.0, 4.0]),
        EuclideanVector.from_iterable([-2.5, 1.3]),
        EuclideanVector.from_iterable([0.9, -1.7]),
        EuclideanVector.from_iterable([-0.4, -0.3]),
    ]
    units = [v.unit_vector() for v in vectors]

    for v, u in zip(vectors, units):
        print(f"{str(v):>14} -> {u}  |u| = {u.euclidean_norm():.15f}")

    fig, ax = plt.subplots(figsize=(6, 6))

    # Originals (grey) and unit vectors (red) from the origin
    for v in vectors:
        x, y = v.to_list()
        ax.quiver(0, 0, x, y, angles='xy', scale_units='xy', scale=1, color='grey')
    for u in units:
        x, y = u.to_list()
        ax.quiver(0, 0, x, y, angles='xy', scale_units='xy', scale=1, color='red')

    theta = np.linspace(0, 2 * np.pi, 200)
    ax.plot(np.cos(theta), np.sin(theta), 'k--', linewidth=0.8, label='|u| = 1')

    ax.set_xlim(-5, 5)
    ax.set_ylim(-5, 5)
    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)
    ax.legend()
    ax.set_title("EuclideanVector.unit_vector()")
    plt.show()


if __name__ == "__main__":
    run_unit_vector_plot()
