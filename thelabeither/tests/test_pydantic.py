from datetime import UTC, datetime
from unittest import TestCase

from pydantic import ValidationError

from thelabeither import Left, Right

from .models import Delivery, Failure, JobReport


class EitherPydanticFieldTest(TestCase):
    def test_accepts_instances(self) -> None:
        """Existing Left/Right instances validate as-is"""
        report = JobReport(job_id=1, outcome=Right(5))
        self.assertEqual(report.outcome, Right(5))

        report = JobReport(job_id=2, outcome=Left("boom"))
        self.assertEqual(report.outcome, Left("boom"))

    def test_validates_tagged_mappings(self) -> None:
        report = JobReport.model_validate({"job_id": 1, "outcome": {"right": 5}})
        self.assertIsInstance(report.outcome, Right)
        self.assertEqual(report.outcome.right, 5)

        report = JobReport.model_validate({"job_id": 1, "outcome": {"left": "boom"}})
        self.assertIsInstance(report.outcome, Left)
        self.assertEqual(report.outcome.left, "boom")

    def test_validates_payload_type(self) -> None:
        """The type argument of each side is enforced on its payload"""
        with self.assertRaises(ValidationError):
            JobReport.model_validate({"job_id": 1, "outcome": {"right": "five"}})
        with self.assertRaises(ValidationError):
            Failure.model_validate({"error": {"left": 42}})

    def test_rejects_untagged_values(self) -> None:
        for value in (5, "boom", {}, {"left": "a", "right": 1}, {"middle": 1}):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    JobReport.model_validate({"job_id": 1, "outcome": value})

    def test_dumps_tagged_mappings(self) -> None:
        self.assertEqual(
            JobReport(job_id=1, outcome=Right(5)).model_dump(),
            {"job_id": 1, "outcome": {"right": 5}},
        )
        self.assertEqual(
            JobReport(job_id=1, outcome=Left("boom")).model_dump(),
            {"job_id": 1, "outcome": {"left": "boom"}},
        )

    def test_json_round_trip(self) -> None:
        for outcome in (Right(5), Left("boom")):
            with self.subTest(outcome=outcome):
                report = JobReport(job_id=1, outcome=outcome)
                loaded = JobReport.model_validate_json(report.model_dump_json())
                self.assertEqual(loaded, report)

    def test_single_side_field(self) -> None:
        failure = Failure.model_validate_json('{"error": {"left": "timeout"}}')
        self.assertEqual(failure.error, Left("timeout"))
        with self.assertRaises(ValidationError):
            Failure.model_validate({"error": Right("timeout")})

    def test_payload_serialized_in_json_mode(self) -> None:
        """Payloads go through their own serializer, e.g. datetimes as strings"""
        when = datetime(2025, 2, 10, 12, 0, 0, tzinfo=UTC)
        delivery = Delivery(delivered_at=Right(when))
        dumped = delivery.model_dump(mode="json")
        self.assertEqual(dumped["delivered_at"], {"right": "2025-02-10T12:00:00Z"})
        self.assertEqual(Delivery.model_validate(dumped), delivery)

    def test_unparameterized_side_accepts_anything(self) -> None:
        delivery = Delivery.model_validate({"raw": {"right": [1, "two"]}})
        self.assertEqual(delivery.raw, Right([1, "two"]))
        self.assertEqual(Delivery().raw, Right(None))
