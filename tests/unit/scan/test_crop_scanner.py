import asyncio

from shambago.scan_service.service import SAMPLE_ANALYSIS, CropScanner


def test_scan_reports_sample_after_delay():
    results = []

    async def scenario():
        scanner = CropScanner(delay_seconds=0.01)
        assert scanner.analyze(b"\x89PNG", on_result=results.append) is True
        assert scanner.is_analyzing is True
        assert scanner.result is None
        await asyncio.sleep(0.05)
        return scanner

    scanner = asyncio.run(scenario())

    assert scanner.is_analyzing is False
    assert scanner.result == SAMPLE_ANALYSIS
    assert results == [SAMPLE_ANALYSIS]


def test_empty_image_is_ignored():
    async def scenario():
        return CropScanner(delay_seconds=0.01).analyze(b"")

    assert asyncio.run(scenario()) is False


def test_close_cancels_scan():
    results = []

    async def scenario():
        scanner = CropScanner(delay_seconds=0.01)
        scanner.analyze(b"img", on_result=results.append)
        scanner.close()
        await asyncio.sleep(0.05)
        return scanner

    scanner = asyncio.run(scenario())

    assert results == []
    assert scanner.result is None
