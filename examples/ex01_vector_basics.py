"""
ex01_vector_basics.py
---------------------
Goal: Create EuclideanVector objects and use the basic algebra.
This is the "Hello World" of the snapvector library.
"""
import sys

from snapvector import EuclideanVector, EuclideanVectorError, write_vector


def run_vector_demo():
    print("--- 1. Construction ---")
    a = EuclideanVector.from_iterable([3.0, 4.0])
    b = EuclideanVector(2, 1.0)
    print(f"a = {a}")
    print(f"b = {b}")
    print(f"default = {EuclideanVector()}")

    print("\n--- 2. Algebra ---")
    print(f"a + b  = {a + b}")
    print(f"a - b  = {a - b}")
    print(f"a . b  = {a * b}")
    print(f"2 * a  = {2 * a}")
    print(f"a / 2  = {a / 2}")

    print("\n--- 3. Norm and Unit Vector ---")
    print(f"|a|    = {a.euclidean_norm()}")   # Should be 5
    print(f"unit a = {a.unit_vector()}")      # Should be [0.6 0.8]

    print("\n--- 4. Ownership ---")
    c = a.copy()
    c[0] = -1.0
    print(f"copy edited: c = {c}, a untouched = {a}")
    d = a.move()
    print(f"after move: d = {d}, a = {a} (dims = {a.get_num_dimensions()})")

    print("\n--- 5. Contract Violations ---")
    try:
        d + EuclideanVector(3)
    except EuclideanVectorError as e:
        print(f"Caught: {e}")

    print("\n--- 6. Stream Output ---")
    write_vector(sys.stdout, d).write("\n")


if __name__ == "__main__":
    run_vector_demo()
