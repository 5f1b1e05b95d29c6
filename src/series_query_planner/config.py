"""Runtime settings for the planning pipeline."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from series_query_planner.output import ConsolePlanOutput, PlanOutput, SqsPlanOutput

ENV_PREFIX = "SERIES_PLANNER_"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class PlannerConfig:
    """Settings for logging and plan delivery."""

    log_level: str = "INFO"
    pretty_logs: bool = False
    console_prefix: str = "[PLAN]"
    sqs_queue_url: str | None = None
    aws_region: str = "us-east-1"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PlannerConfig":
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper(),
            pretty_logs=env.get(f"{ENV_PREFIX}PRETTY_LOGS", "").lower() in _TRUTHY,
            console_prefix=env.get(f"{ENV_PREFIX}CONSOLE_PREFIX", "[PLAN]"),
            sqs_queue_url=env.get(f"{ENV_PREFIX}SQS_QUEUE_URL") or None,
            aws_region=env.get("AWS_REGION", "us-east-1"),
        )

    def validate(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.sqs_queue_url is not None and not self.sqs_queue_url.startswith("http"):
            raise ValueError("sqs_queue_url must be an http(s) queue URL")

    def build_outputs(self) -> list[PlanOutput]:
        outputs: list[PlanOutput] = [ConsolePlanOutput(prefix=self.console_prefix)]
        if self.sqs_queue_url:
            outputs.append(SqsPlanOutput(queue_url=self.sqs_queue_url, region=self.aws_region))
        return outputs
