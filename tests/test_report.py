from flightlog.analysis import FlightLogAnalyzer
from flightlog.config import AnalysisConfig
from flightlog.report import format_duration, render_markdown, render_summary
from flightlog.session import SessionAggregator


def analyzed(sample_factory):
    analyzer = FlightLogAnalyzer(AnalysisConfig(smooth_units=1))
    rows = [(0, 0.0, 100.0), (10, 5.0, 101.25), (220, 0.0, 101.0), (300, 5.0, 101.0)]
    for i, (t, c, alt) in enumerate(rows, start=1):
        analyzer.process(sample_factory(i, current=c, altitude=alt, seconds=t))
    return analyzer.aggregator


def test_format_duration():
    assert format_duration(0) == "00:00"
    assert format_duration(210) == "03:30"
    assert format_duration(3725.4) == "62:05"
    assert format_duration(-5) == "-00:05"


def test_render_summary(sample_factory):
    text = render_summary("flight.csv", analyzed(sample_factory))
    assert text.splitlines() == [
        "flight.csv contains data for 1 LiPos worth of flights:",
        "LiPo 0: 03:30",
        "Flight 0: peak 1.25 m",
        "Flight 1: peak 0.00 m (in progress)",
    ]


def test_render_summary_without_flights():
    assert render_summary("empty.csv", SessionAggregator()) == "empty.csv contains data for 0 LiPos worth of flights:"


def test_render_markdown(sample_factory):
    text = render_markdown("flight.csv", analyzed(sample_factory))
    assert text.startswith("# Flight Summary: flight.csv")
    assert "- Flights: **2**" in text
    assert "03:30" in text
    assert "in progress" in text


def test_render_markdown_without_flights():
    text = render_markdown("empty.csv", SessionAggregator())
    assert "- Batteries: **0**" in text
    assert "No flights detected" in text
