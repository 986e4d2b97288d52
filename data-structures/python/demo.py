"""
Circular Queue Demo -- Scripted walk-through, amortized doubling cost, and
index wrap-around behavior.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.colors import ListedColormap

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from circular_queue import CircularQueue, EmptyQueueError

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

INITIAL_CAPACITY = 3


def front_index(q):
    """Physical index of the front element, or None when empty."""
    if q.is_empty():
        return None
    return q.slots().index(q.peek())


# ---------------------------------------------------------------------------
# Example 1: Scripted Walk-Through
# ---------------------------------------------------------------------------
def example_1_scripted_walkthrough():
    """Replay the classic a..h script and show the raw store after each step."""
    print("=" * 60)
    print("Example 1: Scripted Walk-Through")
    print("=" * 60)

    q = CircularQueue(INITIAL_CAPACITY)
    print(f"\n  new CircularQueue({INITIAL_CAPACITY})")
    print(f"    {q}")

    snapshots = [("start", q.slots())]

    def do_enqueue(value):
        q.enqueue(value)
        print(f"\n  ENQUEUE {value!r}")
        print(f"    {q}  size={q.size()} capacity={q.capacity()}")
        snapshots.append((f"+{value}", q.slots()))

    def do_dequeue():
        value = q.dequeue()
        print(f"\n  DEQUEUE -> {value!r}")
        print(f"    {q}  size={q.size()} capacity={q.capacity()}")
        snapshots.append((f"-{value}", q.slots()))
        return value

    for value in "abc":
        do_enqueue(value)
    assert q.is_full()
    dequeued = [do_dequeue()]
    do_enqueue("d")
    do_enqueue("e")
    do_enqueue("f")
    do_enqueue("g")
    dequeued.append(do_dequeue())
    dequeued.append(do_dequeue())
    do_enqueue("h")
    while not q.is_empty():
        dequeued.append(do_dequeue())

    print("\n  DEQUEUE on empty queue")
    try:
        q.dequeue()
    except EmptyQueueError as e:
        print(f"    {e}")
        print(f"    {q}")

    assert dequeued == list("abcdefgh"), "FIFO order violated"
    print(f"\n  Dequeue order: {' '.join(dequeued)} -- FIFO preserved.")

    max_cap = max(len(s) for _, s in snapshots)
    grid = np.full((len(snapshots), max_cap), -1.0)
    for row, (_, slots) in enumerate(snapshots):
        grid[row, :len(slots)] = [0.0 if s is None else 1.0 for s in slots]

    fig, axes = plt.subplots(1, 2, figsize=(14, 8), gridspec_kw={"width_ratios": [3, 2]})

    cmap = ListedColormap(["#ecf0f1", "white", COLORS["blue"]])
    axes[0].imshow(grid, cmap=cmap, vmin=-1.5, vmax=1.5, aspect="auto")
    for row, (_, slots) in enumerate(snapshots):
        for col, s in enumerate(slots):
            if s is not None:
                axes[0].text(col, row, s, ha="center", va="center",
                             color="white", fontsize=11, fontweight="bold")
    axes[0].set_yticks(range(len(snapshots)))
    axes[0].set_yticklabels([label for label, _ in snapshots], fontsize=9)
    axes[0].set_xticks(range(max_cap))
    axes[0].set_xlabel("Physical slot")
    axes[0].set_ylabel("Operation")
    axes[0].set_title("Backing Store After Each Operation\nGrey = slot not allocated yet",
                      fontsize=10, fontweight="bold")
    axes[0].set_xticks(np.arange(-0.5, max_cap, 1), minor=True)
    axes[0].set_yticks(np.arange(-0.5, len(snapshots), 1), minor=True)
    axes[0].grid(which="minor", color="gray", linewidth=0.5)
    axes[0].tick_params(which="minor", length=0)

    sizes = (grid == 1.0).sum(axis=1)
    capacities = (grid >= 0.0).sum(axis=1)
    steps = np.arange(len(snapshots))
    axes[1].step(steps, capacities, where="post", color=COLORS["red"],
                 linewidth=2, label="Capacity")
    axes[1].plot(steps, sizes, "o-", color=COLORS["blue"], linewidth=2, label="Size")
    axes[1].set_xticks(steps)
    axes[1].set_xticklabels([label for label, _ in snapshots], rotation=60, fontsize=8)
    axes[1].set_ylabel("Slots")
    axes[1].set_title("Size vs Capacity\nCapacity doubles on enqueue into a full store",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    fig.suptitle("Circular Queue: Scripted Walk-Through", fontsize=14, fontweight="bold", y=1.0)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_scripted_walkthrough.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_scripted_walkthrough.png")


# ---------------------------------------------------------------------------
# Example 2: Amortized Doubling
# ---------------------------------------------------------------------------
def example_2_amortized_doubling():
    """Count element copies per enqueue when growing from capacity 1."""
    print("\n" + "=" * 60)
    print("Example 2: Amortized Doubling Cost")
    print("=" * 60)

    n_ops = 2049
    q = CircularQueue(1)
    copies = np.zeros(n_ops, dtype=np.int64)
    for i in range(n_ops):
        cap_before = q.capacity()
        size_before = q.size()
        q.enqueue(i)
        if q.capacity() != cap_before:
            copies[i] = size_before
    assert list(q) == list(range(n_ops))

    ops = np.arange(1, n_ops + 1)
    doubling_avg = np.cumsum(copies) / ops
    # Growing by one slot copies every element on every enqueue.
    additive_avg = np.cumsum(np.arange(n_ops)) / ops

    resize_points = np.nonzero(copies)[0]
    print(f"\n  Enqueues: {n_ops}, final capacity: {q.capacity()}")
    print(f"  Resizes: {len(resize_points)}, total copies: {copies.sum():,}")
    print(f"\n  {'Enqueue #':>10} {'Copies':>8} {'Avg copies/op':>15}")
    print(f"  {'-'*36}")
    for idx in resize_points:
        print(f"  {idx + 1:>10} {copies[idx]:>8} {doubling_avg[idx]:>15.3f}")
    print(f"\n  Average copies per enqueue: {doubling_avg[-1]:.3f} (bounded by 2)")
    print(f"  Grow-by-one average:        {additive_avg[-1]:.1f}")
    assert doubling_avg.max() < 2.0

    fig, axes = plt.subplots(1, 3, figsize=(18, 5.5))

    axes[0].bar(resize_points + 1, copies[resize_points], width=n_ops / 80,
                color=COLORS["orange"], edgecolor="white")
    axes[0].set_xlabel("Enqueue number")
    axes[0].set_ylabel("Elements copied")
    axes[0].set_title("Copy Cost of Each Resize\nRare, and each twice the last",
                      fontsize=10, fontweight="bold")
    axes[0].grid(True, alpha=0.3, axis="y")

    axes[1].plot(ops, doubling_avg, color=COLORS["green"], linewidth=2, label="Doubling")
    axes[1].axhline(2.0, color=COLORS["red"], linestyle="--", linewidth=1.5, label="Bound = 2")
    axes[1].set_xlabel("Enqueues performed")
    axes[1].set_ylabel("Average copies per enqueue")
    axes[1].set_ylim(0, 2.5)
    axes[1].set_title("Amortized Cost Stays Constant\nSawtooth under the bound",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    axes[2].loglog(ops, additive_avg + 1, color=COLORS["red"], linewidth=2, label="Grow by one")
    axes[2].loglog(ops, doubling_avg + 1, color=COLORS["green"], linewidth=2, label="Doubling")
    axes[2].set_xlabel("Enqueues performed")
    axes[2].set_ylabel("Average copies per enqueue + 1")
    axes[2].set_title("Doubling vs Additive Growth\nO(1) vs O(n) per operation",
                      fontsize=10, fontweight="bold")
    axes[2].legend(fontsize=9)
    axes[2].grid(True, alpha=0.3, which="both")

    fig.suptitle("Circular Queue: Amortized Doubling", fontsize=14, fontweight="bold", y=1.02)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_amortized_doubling.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_amortized_doubling.png")


# ---------------------------------------------------------------------------
# Example 3: Wrap-Around at Fixed Capacity
# ---------------------------------------------------------------------------
def example_3_wrap_around():
    """Random enqueue/dequeue traffic that never overflows the store."""
    print("\n" + "=" * 60)
    print("Example 3: Wrap-Around at Fixed Capacity")
    print("=" * 60)

    capacity = 8
    n_steps = 120
    q = CircularQueue(capacity)
    rng = np.random.default_rng(SEED)

    fronts = []
    rears = []
    sizes = []
    expected = []
    next_value = 0
    for _ in range(n_steps):
        want_enqueue = rng.random() < 0.5
        if (want_enqueue and not q.is_full()) or q.is_empty():
            q.enqueue(next_value)
            expected.append(next_value)
            next_value += 1
        else:
            assert q.dequeue() == expected.pop(0)
        front = front_index(q)
        fronts.append(np.nan if front is None else front)
        rears.append(np.nan if front is None else (front + q.size()) % capacity)
        sizes.append(q.size())

    assert q.capacity() == capacity, "Store grew although it never overflowed"
    f = np.array(fronts)
    wraps = int(np.sum((f[:-1] == capacity - 1) & (f[1:] == 0)))
    print(f"\n  Capacity: {capacity}, steps: {n_steps}")
    print(f"  Elements enqueued: {next_value}, still queued: {q.size()}")
    print(f"  Front index wrapped to 0 {wraps} times; capacity unchanged.")

    fig, axes = plt.subplots(2, 1, figsize=(14, 8), sharex=True)
    steps = np.arange(n_steps)
    axes[0].step(steps, fronts, where="post", color=COLORS["blue"], linewidth=2, label="front")
    axes[0].step(steps, rears, where="post", color=COLORS["purple"], linewidth=1.5,
                 linestyle="--", label="next rear")
    axes[0].set_ylabel("Physical index")
    axes[0].set_yticks(range(capacity))
    axes[0].set_title("Indices Advance Modulo Capacity\nNo element is ever shifted",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9, loc="upper right")
    axes[0].grid(True, alpha=0.3)

    axes[1].fill_between(steps, sizes, step="post", color=COLORS["green"], alpha=0.4)
    axes[1].axhline(capacity, color=COLORS["red"], linestyle="--", linewidth=1.5,
                    label=f"Capacity = {capacity}")
    axes[1].set_xlabel("Step")
    axes[1].set_ylabel("Size")
    axes[1].set_ylim(0, capacity + 1)
    axes[1].legend(fontsize=9, loc="upper right")
    axes[1].grid(True, alpha=0.3)

    fig.suptitle("Circular Queue: Wrap-Around", fontsize=14, fontweight="bold", y=1.0)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_wrap_around.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_wrap_around.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Bundle the visualizations into a single PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Circular Queue", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Modulo Wrapping and Amortized Doubling",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "An array-backed FIFO queue. The front index and the insertion\n"
            "point advance modulo the capacity, so dequeue is O(1) and never\n"
            "shifts elements. Enqueueing into a full store allocates twice the\n"
            "space and copies the contents in logical order from index 0.\n\n"
            "  rear  = (front + size) mod capacity\n"
            "  front = (front + 1) mod capacity      on dequeue\n"
            "  new[i] = old[(front + i) mod capacity] on resize\n\n"
            "This demo covers:\n"
            "  1. Scripted walk-through of the raw backing store\n"
            "  2. Amortized copy cost of doubling vs grow-by-one\n"
            "  3. Wrap-around under random traffic at fixed capacity\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6, family="monospace")
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_scripted_walkthrough.png": "Example 1: Scripted Walk-Through",
            "02_amortized_doubling.png": "Example 2: Amortized Doubling Cost",
            "03_wrap_around.png": "Example 3: Wrap-Around at Fixed Capacity",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Circular Queue Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print(f"Initial capacity: {INITIAL_CAPACITY}")
    print()

    example_1_scripted_walkthrough()
    example_2_amortized_doubling()
    example_3_wrap_around()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
