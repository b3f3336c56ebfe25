import threading

from kerndata.assign_once import AssignOnce


def test_starts_empty():
    assert AssignOnce().get() is None


def test_set_then_get_returns_value():
    cell = AssignOnce()
    payload = {"name": "device"}
    cell.set(payload)
    assert cell.get() is payload


def test_later_set_replaces_value():
    cell = AssignOnce()
    cell.set("first")
    cell.set("second")
    assert cell.get() == "second"


def test_concurrent_sets_leave_one_of_the_values():
    cell = AssignOnce()
    values = list(range(32))
    threads = [threading.Thread(target=cell.set, args=(v,)) for v in values]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert cell.get() in values