import unittest

from apps.api.http import ApiClient
from apps.api.steps import LoggingStepListener, Step, StepRecorder, step
from apps.api.testing import RecordingTransport


class Widgets:
    def __init__(self, client):
        self.client = client

    @step("Get widget by ID: {widget_id}")
    def get(self, widget_id):
        return self.client.get("/widgets/{id}", path_params={"id": widget_id})

    @step("List widgets in {color} (limit {limit})")
    def list(self, color, limit=10):
        return self.client.get("/widgets", params={"color": color, "limit": limit})

    @step("Broken widget call")
    def broken(self):
        raise RuntimeError("bad request building")


class StepDecoratorTests(unittest.TestCase):
    def setUp(self):
        self.recorder = StepRecorder()
        self.client = ApiClient(
            "https://store.test", transport=RecordingTransport(), listeners=[self.recorder]
        )
        self.addCleanup(self.client.close)
        self.widgets = Widgets(self.client)

    def test_title_formatted_from_arguments(self):
        self.widgets.get(5)
        self.widgets.get(widget_id=6)
        self.assertEqual(self.recorder.titles, ["Get widget by ID: 5", "Get widget by ID: 6"])

    def test_defaults_are_available_to_title(self):
        self.widgets.list("red")
        self.assertEqual(self.recorder.titles, ["List widgets in red (limit 10)"])

    def test_one_step_per_call(self):
        self.widgets.get(1)
        self.assertEqual(len(self.recorder.steps), 1)
        self.assertEqual(self.recorder.last.path, "/widgets/1")

    def test_errors_raised_inside_step_are_recorded_and_propagate(self):
        with self.assertRaises(RuntimeError):
            self.widgets.broken()
        self.assertTrue(self.recorder.last.failed)
        self.assertIsNone(self.recorder.last.status_code)

    def test_template_exposed_on_wrapper(self):
        self.assertEqual(Widgets.get.step_title, "Get widget by ID: {widget_id}")

    def test_recorder_clear(self):
        self.widgets.get(1)
        self.recorder.clear()
        self.assertEqual(self.recorder.steps, [])
        self.assertIsNone(self.recorder.last)


class LoggingStepListenerTests(unittest.TestCase):
    def test_logs_finished_step_with_status(self):
        client = ApiClient(
            "https://store.test",
            transport=RecordingTransport(),
            listeners=[LoggingStepListener()],
        )
        self.addCleanup(client.close)
        with self.assertLogs("apps.api.steps", level="INFO") as captured:
            client.get("/carts", params={"limit": 3})
        message = captured.records[-1].getMessage()
        self.assertTrue(message.startswith("GET /carts | component=api layer=step method=GET"))
        self.assertIn("status=200", message)

    def test_logs_bodies_when_enabled(self):
        listener = LoggingStepListener(log_bodies=True)
        client = ApiClient(
            "https://store.test", transport=RecordingTransport(body={"ok": True}), listeners=[listener]
        )
        self.addCleanup(client.close)
        with self.assertLogs("apps.api.steps", level="INFO") as captured:
            client.post("/carts", json={"userId": 1})
        self.assertIn("request_body=", captured.output[-1])
        self.assertIn("response_body=", captured.output[-1])

    def test_failed_step_logs_warning(self):
        current = Step(title="Get all users", method="GET", path="/users", error=OSError("down"))
        with self.assertLogs("apps.api.steps", level="WARNING") as captured:
            LoggingStepListener().on_step_end(current)
        self.assertIn("error=OSError", captured.output[0])
