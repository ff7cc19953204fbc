"""
Dynamic Array Demo -- Error taxonomy walkthrough, capacity growth trace,
amortized copy cost, and append vs front-insert timing.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from dynamic_array import (
    DynamicArray,
    INITIAL_CAPACITY,
    GROWTH_FACTOR,
    grow_target,
    ErrorKind,
    attempt,
)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "orange": "#f39c12",
    "dark": "#2c3e50",
}


# ---------------------------------------------------------------------------
# Example 1: Operations and Error Kinds
# ---------------------------------------------------------------------------
def example_1_operations():
    """Walk through insert/remove and show which error each misuse produces."""
    print("=" * 60)
    print("Example 1: Operations and Error Kinds")
    print("=" * 60)

    arr = DynamicArray.create()
    for v in (1, 2, 3):
        arr.add_last(v)
    print(f"  after add_last x3:  {arr!r}")
    arr.add(1, 99)
    print(f"  after add(1, 99):   {arr!r}")
    removed = arr.remove(2)
    print(f"  remove(2) -> {removed}:  {arr!r}")
    old = arr.set(0, "one")
    print(f"  set(0, 'one') -> {old}: {arr!r}")

    empty = DynamicArray.create()
    cases = [
        ("get(0) on empty", attempt(empty.get, 0)),
        ("remove_last() on empty", attempt(empty.remove_last)),
        ("get(len) on filled", attempt(arr.get, arr.len())),
        ("add(len + 1, x)", attempt(arr.add, arr.len() + 1, "x")),
        ("grow(2**62)", attempt(arr.grow, 2 ** 62)),
        ("add(len, x)", attempt(arr.add, arr.len(), "x")),
    ]
    print()
    for label, result in cases:
        print(f"  {label:<26} {result.kind.name}")
    assert cases[0][1].kind is ErrorKind.EMPTY_LIST
    assert cases[1][1].kind is ErrorKind.EMPTY_LIST
    assert cases[2][1].kind is ErrorKind.OUT_OF_BOUNDS
    assert cases[3][1].kind is ErrorKind.OUT_OF_BOUNDS
    assert cases[4][1].kind is ErrorKind.ALLOCATION
    assert cases[5][1].is_ok

    empty.destroy()
    arr.destroy()


# ---------------------------------------------------------------------------
# Example 2: Capacity Growth Trace
# ---------------------------------------------------------------------------
def example_2_growth_trace(n=500):
    """Record length and capacity after every append."""
    print("\n" + "=" * 60)
    print("Example 2: Capacity Growth Trace")
    print("=" * 60)

    arr = DynamicArray.create()
    lengths, capacities, grow_points = [], [], []
    for i in range(n):
        before = arr.capacity()
        arr.add_last(i)
        if arr.capacity() != before:
            grow_points.append((arr.len(), before, arr.capacity()))
        lengths.append(arr.len())
        capacities.append(arr.capacity())

    print(f"  initial capacity {INITIAL_CAPACITY}, growth factor {GROWTH_FACTOR}")
    print(f"  {len(grow_points)} reallocations for {n} appends")
    for length, before, after in grow_points[:8]:
        print(f"    at length {length:>4}: {before:>4} -> {after:>4}")
    print(f"  grow_target(1) = {grow_target(1)} (never stalls at small capacities)")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].step(lengths, capacities, where="post", color=COLORS["blue"], label="capacity")
    axes[0].plot(lengths, lengths, color=COLORS["dark"], linestyle="--", label="length")
    axes[0].set_xlabel("Elements appended")
    axes[0].set_ylabel("Slots")
    axes[0].set_title("Capacity vs Length\n1.5x geometric growth", fontsize=10, fontweight="bold")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    utilization = np.array(lengths) / np.array(capacities)
    axes[1].plot(lengths, utilization, color=COLORS["green"])
    axes[1].axhline(1 / GROWTH_FACTOR, color=COLORS["red"], linestyle=":",
                    label=f"1 / {GROWTH_FACTOR}")
    axes[1].set_xlabel("Elements appended")
    axes[1].set_ylabel("length / capacity")
    axes[1].set_title("Buffer Utilization\nDrops after each reallocation",
                      fontsize=10, fontweight="bold")
    axes[1].set_ylim(0, 1.05)
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "growth_trace.png", dpi=120)
    arr.destroy()
    return fig


# ---------------------------------------------------------------------------
# Example 3: Amortized Copy Cost
# ---------------------------------------------------------------------------
def example_3_amortized_cost(n=2000):
    """Count element copies caused by reallocation per append."""
    print("\n" + "=" * 60)
    print("Example 3: Amortized Copy Cost")
    print("=" * 60)

    arr = DynamicArray.create()
    copies = 0
    per_append = []
    for i in range(n):
        if arr.len() == arr.capacity():
            copies += arr.len()
        arr.add_last(i)
        per_append.append(copies / arr.len())

    bound = 1 / (GROWTH_FACTOR - 1)
    print(f"  total copies for {n} appends: {copies}")
    print(f"  copies per append: {per_append[-1]:.3f} (bound ~ {bound:.1f})")
    assert per_append[-1] <= bound + 1

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(range(1, n + 1), per_append, color=COLORS["orange"])
    ax.axhline(bound, color=COLORS["red"], linestyle="--", label=f"1 / (factor - 1) = {bound:.1f}")
    ax.set_xlabel("Elements appended")
    ax.set_ylabel("Cumulative copies / length")
    ax.set_title("Amortized Reallocation Cost\nBounded by a constant", fontsize=10, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "amortized_cost.png", dpi=120)
    arr.destroy()
    return fig


# ---------------------------------------------------------------------------
# Example 4: Append vs Front Insert Timing
# ---------------------------------------------------------------------------
def example_4_timing(sizes=(1000, 2000, 4000, 8000)):
    """add_last is amortized O(1); add_first shifts every element."""
    print("\n" + "=" * 60)
    print("Example 4: Append vs Front Insert Timing")
    print("=" * 60)

    t_last, t_first = [], []
    for n in sizes:
        arr = DynamicArray.create(np.int64)
        start = time.perf_counter()
        for i in range(n):
            arr.add_last(i)
        t_last.append(time.perf_counter() - start)
        arr.destroy()

        arr = DynamicArray.create(np.int64)
        start = time.perf_counter()
        for i in range(n):
            arr.add_first(i)
        t_first.append(time.perf_counter() - start)
        arr.destroy()

        print(f"  n={n:>5}: add_last {t_last[-1] * 1e3:7.2f} ms, "
              f"add_first {t_first[-1] * 1e3:7.2f} ms")

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(sizes, [t * 1e3 for t in t_last], "o-", color=COLORS["green"], label="add_last")
    ax.plot(sizes, [t * 1e3 for t in t_first], "s-", color=COLORS["red"], label="add_first")
    ax.set_xlabel("Elements inserted")
    ax.set_ylabel("Time (ms)")
    ax.set_title("Insertion Cost by Position", fontsize=10, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "insert_timing.png", dpi=120)
    return fig


def main():
    example_1_operations()
    figures = [
        example_2_growth_trace(),
        example_3_amortized_cost(),
        example_4_timing(),
    ]

    report_path = Path(__file__).parent / "report.pdf"
    with PdfPages(report_path) as pdf:
        for fig in figures:
            pdf.savefig(fig)
            plt.close(fig)

    print("\n" + "=" * 60)
    print(f"Saved {len(figures)} figures to {VIZ_DIR}/ and report to {report_path}")
    print("=" * 60)


if __name__ == "__main__":
    main()
