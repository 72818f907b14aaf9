import asyncio
import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fast_typing.controllers.countdown import Countdown


class RecordingRunner:
    """Keeps scheduled coroutines instead of running them."""

    def __init__(self):
        self.calls = []

    def __call__(self, coro_fn, *args):
        self.calls.append((coro_fn, args))
        return self

    def cancel(self):
        pass


class TestCountdown(unittest.IsolatedAsyncioTestCase):
    async def test_ticks_periodically(self):
        ticks = []
        countdown = Countdown(interval=0.01)
        countdown.start(lambda: ticks.append(1))
        await asyncio.sleep(0.1)
        countdown.cancel()
        self.assertGreaterEqual(len(ticks), 2)

    async def test_cancel_stops_ticks(self):
        ticks = []
        countdown = Countdown(interval=0.01)
        countdown.start(lambda: ticks.append(1))
        countdown.cancel()
        self.assertFalse(countdown.active)
        await asyncio.sleep(0.05)
        self.assertEqual(ticks, [])

    async def test_start_replaces_previous(self):
        first, second = [], []
        countdown = Countdown(interval=0.01)
        countdown.start(lambda: first.append(1))
        countdown.start(lambda: second.append(1))
        await asyncio.sleep(0.05)
        countdown.cancel()
        self.assertEqual(first, [])
        self.assertGreater(len(second), 0)

    async def test_cancel_from_inside_tick(self):
        ticks = []
        countdown = Countdown(interval=0.01)

        def on_tick():
            ticks.append(1)
            countdown.cancel()

        countdown.start(on_tick)
        await asyncio.sleep(0.08)
        self.assertEqual(ticks, [1])

    async def test_failing_tick_keeps_loop_alive(self):
        ticks = []
        countdown = Countdown(interval=0.01)

        def on_tick():
            ticks.append(1)
            if len(ticks) == 1:
                raise RuntimeError("render failed")

        with self.assertLogs("Countdown", level="ERROR"):
            countdown.start(on_tick)
            await asyncio.sleep(0.1)
        countdown.cancel()
        self.assertGreaterEqual(len(ticks), 2)

    async def test_not_active_after_task_cancelled_directly(self):
        countdown = Countdown(interval=0.01)
        countdown.start(lambda: None)
        countdown._handle.cancel()
        await asyncio.sleep(0.03)
        self.assertFalse(countdown.active)

    async def test_stale_tick_is_noop(self):
        ticks = []
        runner = RecordingRunner()
        countdown = Countdown(runner=runner, interval=0)
        countdown.start(lambda: ticks.append(1))
        self.assertTrue(countdown.active)

        coro_fn, args = runner.calls[0]
        countdown.cancel()
        # The scheduled loop only runs now, after the cancellation
        await coro_fn(*args)
        self.assertEqual(ticks, [])

    async def test_generation_changes(self):
        countdown = Countdown(runner=RecordingRunner())
        countdown.start(lambda: None)
        generation = countdown.generation
        self.assertTrue(countdown.is_current(generation))
        countdown.cancel()
        self.assertFalse(countdown.is_current(generation))


if __name__ == '__main__':
    unittest.main()
