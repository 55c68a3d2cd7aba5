import random

import numpy as np

from hull.line_container import LineContainer, MinLineContainer
from utils.brute_force import max_of_lines, min_of_lines
from visualization.draw_envelope import render_envelope

from config import get_active_params


SEED = 2024
RANDOM_LINES = 300
RANDOM_QUERIES = 200
COORD_LIMIT = 1000


def check_scenario():
    """
    The three-line example:
        y = x, y = -x, y = 5
    Every line is the maximum somewhere, so all three survive.
    """
    hull = LineContainer("integer")
    for k, m in [(1, 0), (-1, 0), (0, 5)]:
        hull.insert(k, m)

    expected = {-10: 10, 0: 5, 10: 10}
    for x, want in expected.items():
        got = hull.query(x)
        if got != want:
            print(f"[ERROR] scenario: query({x}) = {got}, expected {want}")
            return False

    if len(hull) != 3:
        print(f"[ERROR] scenario: {len(hull)} lines survived, expected 3")
        return False

    print("[OK] scenario: three lines, three envelope pieces")
    return True


def check_random(domain: str, rng: random.Random, minimize: bool = False):
    """
    Inserts random lines (duplicated slopes included) and compares every
    query against a brute-force scan over all inserted lines.
    """
    params = get_active_params(domain)
    hull = MinLineContainer(domain) if minimize else LineContainer(domain)
    label = f"{params['DOMAIN']}/{'min' if minimize else 'max'}"

    def draw():
        v = rng.randint(-COORD_LIMIT, COORD_LIMIT)
        return v if domain == "integer" else v / 7.0

    slopes, intercepts = [], []
    for _ in range(RANDOM_LINES):
        k, m = draw(), draw()
        slopes.append(k)
        intercepts.append(m)
        hull.insert(k, m)

    xs = [draw() * 3 for _ in range(RANDOM_QUERIES)]
    reference = min_of_lines if minimize else max_of_lines
    want = reference(slopes, intercepts, xs)
    got = hull.query_many(xs)

    if domain == "integer":
        ok = all(a == b for a, b in zip(got, want))
    else:
        ok = np.allclose(got.astype(float), want.astype(float))

    if not ok:
        print(f"[ERROR] {label}: envelope disagrees with brute force")
        return False

    if hull.removed_count > hull.inserted_count:
        print(f"[WARN] {label}: {hull.removed_count} removals for {hull.inserted_count} inserts")

    print(
        f"[OK] {label}: {hull.inserted_count} inserted, "
        f"{len(hull)} on the envelope, {hull.removed_count} removed"
    )
    return True


def main():
    """
    Self-check entry point:
      - Runs the fixed three-line scenario
      - Compares both domains (and the min variant) against brute force
      - Renders one envelope in memory
    """
    rng = random.Random(SEED)

    results = [check_scenario()]
    for domain in ("integer", "float"):
        results.append(check_random(domain, rng))
        results.append(check_random(domain, rng, minimize=True))

    hull = LineContainer("float")
    for k, m in [(1, 0), (-1, 0), (0, 5), (0.5, 3)]:
        hull.insert(k, m)
    canvas = render_envelope(hull, (-12, 12))
    print(f"[OK] rendered envelope: canvas {canvas.shape[1]}x{canvas.shape[0]}")

    if all(results):
        print("\n=== All checks passed ===")
    else:
        print("\n=== Some checks FAILED ===")


if __name__ == "__main__":
    main()
