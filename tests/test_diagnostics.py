import gc

from hashoff.diagnostics import AllocationTracker


def test_balanced_records_report_nothing():
    tracker = AllocationTracker()
    tracker.register("Node")
    tracker.record_new("Node")
    tracker.record_delete("Node")
    assert tracker.types_with_errors() == {}


def test_leak_and_double_free_are_reported():
    tracker = AllocationTracker()
    tracker.register("Node")
    tracker.register("Slot")
    tracker.record_new("Node")
    tracker.record_new("Node")
    tracker.record_delete("Slot")
    assert tracker.types_with_errors() == {"Node": 2, "Slot": -1}


def test_unregistered_types_are_not_reported():
    tracker = AllocationTracker()
    tracker.record_new("Hidden")
    assert tracker.types_with_errors() == {}
    tracker.register("Hidden")
    assert tracker.types_with_errors() == {"Hidden": 1}


def test_clear_resets_counts_but_keeps_registration():
    tracker = AllocationTracker()
    tracker.register("Node")
    tracker.record_new("Node")
    tracker.clear()
    assert tracker.types_with_errors() == {}
    tracker.record_delete("Node")
    assert tracker.types_with_errors() == {"Node": -1}


def test_track_counts_live_instances():
    tracker = AllocationTracker()

    @tracker.track
    class Cell:
        def __init__(self, value):
            self.value = value

    first = Cell(1)
    second = Cell(2)
    assert first.value == 1
    assert tracker.types_with_errors() == {"Cell": 2}
    del first
    gc.collect()
    assert tracker.types_with_errors() == {"Cell": 1}
    del second
    gc.collect()
    assert tracker.types_with_errors() == {}


def test_track_keeps_existing_finaliser():
    tracker = AllocationTracker()
    finalised = []

    @tracker.track
    class Resource:
        def __del__(self):
            finalised.append(True)

    item = Resource()
    del item
    gc.collect()
    assert finalised == [True]
    assert tracker.types_with_errors() == {}