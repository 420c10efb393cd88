import dashkit
from dashkit import alert, timeseries


def test_package_exports() -> None:
    assert dashkit.__version__ == "0.1.0"
    assert callable(timeseries.new)
    assert callable(alert.new)
    assert repr(timeseries.new("CPU")) == "TimeSeries(title='CPU')"
