from helpers import deadline, fixed

from ui_streamlit.app import load_snapshot, run_views


def test_run_views_payload():
    events = [
        fixed("1", "Lecture", "Monday", "10:00", "11:00"),
        deadline("2", "Draft", "Tuesday", depends_on="Lecture"),
        deadline("3", "Review", "Tuesday", depends_on="Ghost"),
    ]
    result = run_views(events, "Tuesday")
    assert [card["title"] for card in result["cards"]] == ["Draft", "Review"]
    assert result["cards"][0]["time"] == "Deadline: 23:59"
    assert result["upcoming"] == ["Draft — Tuesday by 23:59", "Review — Tuesday by 23:59"]
    assert result["dependencies"] == [("Lecture", "Draft"), ("Ghost", "Review")]
    assert result["has_cycle"] is False
    assert len(result["warnings"]) == 1
    assert result["summary"]["busy_minutes"]["Monday"] == 60


def test_load_snapshot_tells_empty_from_missing(tmp_path):
    path = tmp_path / "schedule.json"
    assert load_snapshot(str(path)) is None

    path.write_text("[]", encoding="utf-8")
    events = load_snapshot(str(path))
    assert events == []
    assert run_views(events, "Monday")["cards"] == []
