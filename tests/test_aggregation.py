from video.application.pipeline.aggregation import aggregate_all, aggregate_categories, split_labels
from video.domain.video_field import CategoryField
from video.domain.video_record import VideoRecord


def _totals(table):
    return {label: (a.views, a.frequency) for label, a in table.items()}


def test_split_labels_trims_and_skips_empty():
    assert split_labels("a; b;;c;") == ["a", "b", "c"]
    assert split_labels("") == []
    assert split_labels("a; b;;c;", keep_empty=True) == ["a", "b", "", "c", ""]


def test_end_to_end_hashtag_scenario():
    records = [
        VideoRecord(id="1", title="A", hash_tags="x;y", views=100),
        VideoRecord(id="2", title="B", hash_tags="y", views=50),
    ]

    table = aggregate_categories(records, CategoryField.HASH_TAGS)

    assert _totals(table) == {"x": (100, 1), "y": (150, 2)}
    assert table["x"].effectiveness == 100
    assert table["y"].effectiveness == 75


def test_sample_hashtags_keep_first_appearance_order(sample_records):
    table = aggregate_categories(sample_records, CategoryField.HASH_TAGS)

    assert list(table) == ["#vlog", "#routine", "#food", "#recipe"]
    assert _totals(table)["#vlog"] == (2500, 2)


def test_frequency_counts_memberships_not_records(sample_records):
    table = aggregate_categories(sample_records, CategoryField.TAGS)

    memberships = sum(len(split_labels(r.tags)) for r in sample_records)
    assert sum(a.frequency for a in table.values()) == memberships == 7
    assert _totals(table)["vlog"] == (2500, 2)
    assert _totals(table)["pasta"] == (1000, 2)


def test_aggregation_is_order_independent(sample_records):
    forward = aggregate_categories(sample_records, CategoryField.TOPICS)
    backward = aggregate_categories(list(reversed(sample_records)), CategoryField.TOPICS)

    assert _totals(forward) == _totals(backward)
    assert _totals(forward)["Lifestyle"] == (3000, 3)


def test_empty_field_contributes_nothing_unless_requested(sample_records):
    assert "" not in aggregate_categories(sample_records, CategoryField.HASH_TAGS)

    with_empty = aggregate_categories(sample_records, CategoryField.HASH_TAGS, keep_empty=True)
    assert _totals(with_empty)[""] == (500, 1)


def test_aggregate_all_builds_one_table_per_category_field(sample_records):
    tables = aggregate_all(sample_records)

    assert set(tables) == set(CategoryField)
    assert _totals(tables[CategoryField.TOPICS]) == {
        "Lifestyle": (3000, 3),
        "Health": (1000, 1),
        "Food": (1000, 2),
    }


def test_source_records_are_untouched(sample_records):
    snapshot = [r.to_dict() for r in sample_records]
    aggregate_all(sample_records)
    assert [r.to_dict() for r in sample_records] == snapshot
