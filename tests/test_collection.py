# ==============================================
# Tests for ArrayCollection and reconcile()
# ==============================================

from propel_bundle.form import ArrayCollection, MutableCollection, reconcile


class TestArrayCollection:
    """Tests for the list-backed collection."""

    def test_add_remove_contains(self):
        a, b = object(), object()
        collection = ArrayCollection([a])
        collection.add(b)

        assert len(collection) == 2
        assert b in collection
        assert collection.remove(a) is True
        assert collection.remove(a) is False
        assert collection.to_list() == [b]

    def test_clear(self):
        collection = ArrayCollection([1, 2, 3])
        collection.clear()
        assert len(collection) == 0

    def test_iterating_while_removing(self):
        """Iteration works on a snapshot, so removing inside the loop is safe."""
        collection = ArrayCollection([1, 2, 3, 4])
        for element in collection:
            if element % 2 == 0:
                collection.remove(element)
        assert collection.to_list() == [1, 3]

    def test_satisfies_protocol(self):
        assert isinstance(ArrayCollection(), MutableCollection)
        assert isinstance(set(), MutableCollection)
        assert not isinstance([], MutableCollection)


class TestReconcile:
    """Tests for in-place membership reconciliation."""

    def test_removes_and_adds(self):
        current = ArrayCollection(["a", "b"])
        removed, added = reconcile(current, ["b", "c"], key=lambda x: x)

        assert current.to_list() == ["b", "c"]
        assert removed == ["a"]
        assert added == ["c"]

    def test_keeps_current_instances_with_same_key(self):
        """Members matched by key are not swapped for the incoming instances."""
        old = {"id": 1}
        new = {"id": 1}
        current = ArrayCollection([old])

        reconcile(current, [new], key=lambda m: m["id"])

        assert current[0] is old

    def test_does_not_mutate_desired(self):
        desired = ArrayCollection(["x", "y"])
        reconcile(ArrayCollection(["x"]), desired, key=lambda x: x)
        assert desired.to_list() == ["x", "y"]

    def test_works_on_sets(self):
        current = {1, 2}
        reconcile(current, {2, 3}, key=lambda x: x)
        assert current == {2, 3}
