from tabview.core.change_detector import ChangeDetector


def _rows(n):
    return [{"id": i} for i in range(n)]


def test_first_check_without_baseline_reports_change():
    detector = ChangeDetector()

    assert detector.check(_rows(2)) is True


def test_unchanged_dataset_reports_no_change():
    rows = _rows(3)
    detector = ChangeDetector()
    detector.reset(rows)

    assert detector.check(rows) is False
    assert detector.check(rows) is False


def test_additions_and_removals_are_detected_once():
    rows = _rows(3)
    detector = ChangeDetector()
    detector.reset(rows)

    rows.append({"id": 99})
    assert detector.check(rows) is True
    assert detector.check(rows) is False

    rows.pop(0)
    assert detector.check(rows) is True


def test_reorder_is_a_change():
    rows = _rows(3)
    detector = ChangeDetector()
    detector.reset(rows)

    rows.reverse()

    assert detector.check(rows) is True


def test_new_list_with_same_records_is_not_a_change():
    rows = _rows(3)
    detector = ChangeDetector()
    detector.reset(rows)

    assert detector.check(list(rows)) is False


def test_replacing_a_record_with_an_equal_copy_is_a_change():
    rows = _rows(3)
    detector = ChangeDetector()
    detector.reset(rows)

    rows[1] = dict(rows[1])

    assert detector.check(rows) is True


def test_deep_mutation_is_not_detected():
    rows = _rows(3)
    detector = ChangeDetector()
    detector.reset(rows)

    rows[0]["id"] = 42

    assert detector.check(rows) is False


def test_none_dataset_is_treated_as_empty():
    detector = ChangeDetector()
    detector.reset(None)

    assert detector.check([]) is False
    assert detector.check(None) is False
