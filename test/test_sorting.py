import pyarrow as pa
import pytest

from wrangleground.compute.base import QueryPlanNode
from wrangleground.compute.pagination import PaginateNode
from wrangleground.compute.sorting import SortNode


class MockQueryPlanNode(QueryPlanNode):
    def __init__(self, batches):
        self._batches = batches

    def batches(self):
        for batch in self._batches:
            yield batch

    def __str__(self):
        return "MockQueryPlanNode"


def test_sort_node_single_batch():
    data = pa.record_batch({"values": [5, 3, 1, 4, 2]})
    child_node = MockQueryPlanNode([data])
    sort_node = SortNode(["values"], [False], child_node)

    sorted_batches = list(sort_node.batches())
    assert len(sorted_batches) == 1
    assert sorted_batches[0].column(0).to_pylist() == [1, 2, 3, 4, 5]


def test_sort_node_multiple_batches():
    data1 = pa.record_batch({"values": [5, 3]})
    data2 = pa.record_batch({"values": [1, 4, 2]})
    child_node = MockQueryPlanNode([data1, data2])
    sort_node = SortNode(["values"], [False], child_node)

    sorted_batches = list(sort_node.batches())
    sorted_values = [
        val for batch in sorted_batches for val in batch.column(0).to_pylist()
    ]
    assert sorted_values == [1, 2, 3, 4, 5]


def test_sort_node_descending():
    data = pa.record_batch({"values": [1, 2, 3, 4, 5]})
    child_node = MockQueryPlanNode([data])
    sort_node = SortNode(["values"], [True], child_node)

    sorted_batch = next(sort_node.batches())
    assert sorted_batch.column(0).to_pylist() == [5, 4, 3, 2, 1]


def test_sort_node_is_stable():
    data = pa.record_batch(
        {"animal": ["Dog", "Cat", "Dog", "Lion"], "weight": [8.0, 4.5, 8.0, 190.0], "row": [0, 1, 2, 3]}
    )
    sort_node = SortNode(["weight"], [True], MockQueryPlanNode([data]))

    sorted_batch = next(sort_node.batches())
    assert sorted_batch.column("row").to_pylist() == [3, 0, 2, 1]


def test_sort_node_multiple_keys():
    data = pa.record_batch(
        {"family": ["Felidae", "Canidae", "Felidae", "Canidae"], "weight": [4.5, 30.0, 190.0, 8.0]}
    )
    sort_node = SortNode(["family", "weight"], [False, True], MockQueryPlanNode([data]))

    sorted_batch = next(sort_node.batches())
    assert sorted_batch.column("weight").to_pylist() == [30.0, 8.0, 190.0, 4.5]


def test_sort_node_invalid_keys_and_descending_length():
    data = pa.record_batch({"values": [1, 2, 3, 4, 5]})
    child_node = MockQueryPlanNode([data])
    with pytest.raises(ValueError):
        SortNode(["values"], [True, False], child_node)


def test_sort_node_with_paginate_node():
    child_node = MockQueryPlanNode(
        [
            pa.record_batch({"values": [5, 3, 1, 4, 2]}),
            pa.record_batch({"values": [6, 9, 8, 7, 10]}),
        ]
    )
    sort_node = SortNode(["values"], [False], child_node)
    paginate_node = PaginateNode(offset=0, length=2, child=sort_node)

    sorted_batches = next(paginate_node.batches())
    assert sorted_batches["values"].to_pylist() == [1, 2]


@pytest.mark.parametrize(
    "offset, length, expected",
    [
        (0, 3, [0, 1, 2]),
        (2, 2, [2, 3]),
        (3, 4, [3, 4, 5, 6]),
        (8, 5, [8, 9]),
        (0, 0, []),
        (20, 5, []),
    ],
)
def test_paginate_node_across_batches(offset, length, expected):
    child_node = MockQueryPlanNode(
        [
            pa.record_batch({"values": [0, 1, 2, 3, 4]}),
            pa.record_batch({"values": [5, 6, 7, 8, 9]}),
        ]
    )
    paginate_node = PaginateNode(offset=offset, length=length, child=child_node)

    batches = list(paginate_node.batches())
    assert [v for b in batches for v in b["values"].to_pylist()] == expected
    assert all(b.schema.names == ["values"] for b in batches)
    assert len(batches) >= 1


def test_paginate_node_negative_values():
    with pytest.raises(ValueError):
        PaginateNode(offset=-1, length=2, child=MockQueryPlanNode([]))
