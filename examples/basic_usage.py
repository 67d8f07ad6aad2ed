"""Basic usage example for arenalist."""

from arenalist import EmptyListError, LinkedList, StaleHandleError, swap


def main() -> None:
    """Demonstrate list operations and cursor behavior."""
    print("=== Building and iterating ===\n")
    lst = LinkedList([1, 2, 3])
    print(f"List: {lst}")
    print(f"Reversed: {list(reversed(lst))}\n")

    print("=== Insert and erase through cursors ===\n")
    lst.insert(lst.begin(), 0)
    lst.insert(lst.end(), 4)
    print(f"After inserts at both ends: {lst}")

    it = lst.begin().increment().increment()
    print(f"Cursor at: {it.value}")
    it = lst.erase(it)
    print(f"Erased; cursor moved to: {it.value}, list: {lst}")
    it.value = 30
    print(f"Wrote through cursor: {lst}\n")

    print("=== Merge-in-place assignment ===\n")
    kept = lst.begin()
    lst.assign([7, 8])
    print(f"Assigned [7, 8]: {lst}; first cursor still reads {kept.value}\n")

    print("=== Stale cursors fail explicitly ===\n")
    lst.pop_front()
    try:
        kept.get()
    except StaleHandleError as exc:
        print(f"  ✓ {exc}\n")

    print("=== Swap ===\n")
    other = LinkedList(["a", "b"])
    swap(lst, other)  # type: ignore[arg-type]
    print(f"lst: {lst}, other: {other}\n")

    print("=== Empty access ===\n")
    lst.clear()
    try:
        lst.front()
    except EmptyListError as exc:
        print(f"  ✓ {exc}")
    print(f"  try_front(): {lst.try_front()}")


if __name__ == "__main__":
    main()
