import logging
import os
from collections.abc import Callable

from balanced_tree import BalancedTree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


def main(out: Callable[[str], None] = print) -> BalancedTree[float]:
    out("Testing the BalancedTree class")
    tree: BalancedTree[float] = BalancedTree()

    out("Declaring a BalancedTree and calling is_empty() on it")
    out(f"tree.is_empty(): {tree.is_empty()}")

    out(
        "Adding and removing in this order, then outputting the values "
        "(should output in ascending order): add 3.8, add 20, add -5, add 3, "
        "remove 3.8, add 2, add 0.119, add 100, add 200."
    )
    for value in (3.8, 20, -5, 3):
        tree.insert(value)
    tree.remove(3.8)
    for value in (2, 0.119, 100, 200):
        tree.insert(value)
    logger.debug("Tree after updates: %r (height %d)", tree, tree.height())

    tree.traverse_in_order(lambda value: out(str(value)))

    out("Calling is_empty() again")
    out(f"tree.is_empty(): {tree.is_empty()}")
    out(f"Max: {tree.find_max()}")
    out(f"Min: {tree.find_min()}")
    out(f"Contains 3.78?: {tree.contains(3.78)}")
    out(f"Contains 0.119?: {tree.contains(0.119)}")
    return tree


if __name__ == "__main__":
    main()
