"""
Balanced BST Demo — Worked example, degeneration under skewed inserts, and rebalancing.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from pathlib import Path

from balanced_bst import Tree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)


def collect(traversal):
    result = []
    traversal(lambda node: result.append(node.key))
    return result


def node_positions(tree):
    """Map each node to (in-order index, -depth) for plotting."""
    positions = {}
    nodes = []
    tree.in_order(nodes.append)
    for i, node in enumerate(nodes):
        positions[id(node)] = (i, -tree.depth(node))
    return nodes, positions


def draw_tree(ax, tree, title, color="steelblue"):
    nodes, positions = node_positions(tree)
    for node in nodes:
        x, y = positions[id(node)]
        for child in (node.left, node.right):
            if child is not None:
                cx, cy = positions[id(child)]
                ax.plot([x, cx], [y, cy], color="gray", linewidth=1, zorder=1)
    if nodes:
        xs, ys = zip(*(positions[id(node)] for node in nodes))
        ax.scatter(xs, ys, s=300, color=color, edgecolors="black", zorder=2)
        if len(nodes) <= 40:
            for node in nodes:
                x, y = positions[id(node)]
                ax.text(x, y, f"{node.key:g}", ha="center", va="center", fontsize=7, color="white", zorder=3)
    ax.set_title(f"{title}\nheight = {tree.height()}, balanced = {tree.is_balanced()}")
    ax.set_xlabel("In-order position")
    ax.set_ylabel("-Depth")
    ax.grid(True, alpha=0.3)


def example_1_worked_example():
    """The canonical [3, 6, 6, 1, 8, 1] tree."""
    print("=" * 60)
    print("Example 1: Worked Example [3, 6, 6, 1, 8, 1]")
    print("=" * 60)

    tree = Tree([3, 6, 6, 1, 8, 1])
    tree.pretty_print()
    print(f"Level order: {collect(tree.level_order)}")
    print(f"In order:    {collect(tree.in_order)}")
    print(f"Pre order:   {collect(tree.pre_order)}")
    print(f"Post order:  {collect(tree.post_order)}")
    print(f"Balanced:    {tree.is_balanced()}")
    print(f"find(99):    {tree.find(99)}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    draw_tree(axes[0], tree, "Built from [3, 6, 6, 1, 8, 1]")

    tree.delete_item(3)
    print(f"After delete_item(3): {collect(tree.in_order)}")
    draw_tree(axes[1], tree, "After delete_item(3)", color="darkorange")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_worked_example.png", dpi=150)
    plt.close(fig)

    return fig, tree


def example_2_skewed_inserts():
    """Sequential inserts degrade height linearly until rebalance."""
    print("\n" + "=" * 60)
    print("Example 2: Skewed Inserts and Rebalance")
    print("=" * 60)

    n = 200
    tree = Tree([0])
    heights = np.zeros(n, dtype=int)
    for i in range(n):
        tree.insert(i + 1)
        heights[i] = tree.height()

    print(f"Height after {n} sequential inserts: {heights[-1]}")
    tree.rebalance()
    print(f"Height after rebalance: {tree.height()}")
    print(f"Balanced: {tree.is_balanced()}")

    sizes = np.arange(2, n + 2)
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(sizes, heights, color="steelblue", linewidth=2, label="Sequential inserts")
    ax.plot(sizes, np.floor(np.log2(sizes)) + 1, "g--", linewidth=2, label="Minimal height")
    ax.axhline(tree.height(), color="red", linestyle=":", label="After rebalance")
    ax.set_xlabel("Number of keys")
    ax.set_ylabel("Height")
    ax.set_title("Height Growth Under Sorted Inserts")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_skewed_inserts.png", dpi=150)
    plt.close(fig)

    return fig, tree


def example_3_random_rebalance():
    """Layout of a randomly grown tree before and after rebalance."""
    print("\n" + "=" * 60)
    print("Example 3: Random Inserts, Deletes and Rebalance")
    print("=" * 60)

    np.random.seed(SEED)
    tree = Tree(np.random.randint(0, 100, size=5))
    for value in np.random.randint(0, 100, size=25):
        tree.insert(value)
    for value in np.random.randint(0, 100, size=10):
        tree.delete_item(value)

    print(f"Keys: {len(tree)}, height: {tree.height()}, balanced: {tree.is_balanced()}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 6))
    draw_tree(axes[0], tree, "Before rebalance", color="darkorange")
    tree.rebalance()
    print(f"After rebalance height: {tree.height()}, balanced: {tree.is_balanced()}")
    draw_tree(axes[1], tree, "After rebalance")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_random_rebalance.png", dpi=150)
    plt.close(fig)

    return fig, tree


def example_4_height_vs_size():
    """Balanced construction matches the minimal possible height."""
    print("\n" + "=" * 60)
    print("Example 4: Height of Balanced Construction")
    print("=" * 60)

    sizes = np.arange(1, 513)
    heights = np.array([Tree(range(n)).height() for n in sizes])
    minimal = np.floor(np.log2(sizes)).astype(int) + 1

    mismatches = int(np.sum(heights != minimal))
    print(f"Sizes checked: {len(sizes)}")
    print(f"Heights differing from floor(log2 n) + 1: {mismatches}")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.step(sizes, heights, where="post", color="steelblue", linewidth=2, label="Tree(range(n)).height()")
    ax.plot(sizes, np.log2(sizes) + 1, "g--", linewidth=1, label="log2(n) + 1")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("Number of keys (log scale)")
    ax.set_ylabel("Height")
    ax.set_title("Balanced Construction Height")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_height_vs_size.png", dpi=150)
    plt.close(fig)

    return fig, heights


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        # Title page
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Balanced Binary Search Tree", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Build, Degrade, Rebalance", fontsize=24, ha="center")
        fig.text(0.5, 0.35, "Demonstration Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        # Summary page
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")

        summary_text = """
This report demonstrates a binary search tree over unique numeric keys.

• Construction:
  - Items converted to numbers, deduplicated and sorted
  - Middle key becomes the root, halves built recursively

• Operations:
  - insert / delete_item / find with numeric coercion
  - level, in, pre and post order traversal with a callback
  - height, depth and is_balanced shape queries

• Rebalancing:
  - Inserts never rotate, so sorted input degrades to a list
  - rebalance() rebuilds from the in-order key sequence

Key Findings:
  1. Balanced construction always reaches floor(log2 n) + 1
  2. Sorted inserts grow height linearly
  3. A single rebalance restores minimal height
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, png in figures_data:
            fig = plt.figure(figsize=(11, 8.5))
            fig.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = fig.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(VIZ_DIR / png))
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 19 + "BALANCED BST DEMO" + " " * 22 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_worked_example()
    example_2_skewed_inserts()
    example_3_random_rebalance()
    example_4_height_vs_size()

    generate_pdf_report([
        ("Example 1: Worked Example", "01_worked_example.png"),
        ("Example 2: Skewed Inserts", "02_skewed_inserts.png"),
        ("Example 3: Random Rebalance", "03_random_rebalance.png"),
        ("Example 4: Height vs Size", "04_height_vs_size.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
