import os
from functools import lru_cache

from clients.iam_directory import IamDirectory
from clients.sns_channel import SnsChannel
from notifier.handler import RootActivityNotifier
from notifier.logger import logger
from notifier.settings import load_settings


@lru_cache(maxsize=1)
def build_notifier() -> RootActivityNotifier:
    #once per cold start, warm invocations reuse the clients
    settings = load_settings()  #ConfigError here fails the cold start, not an event
    logger.setLevel(settings.log_level)

    region = os.environ.get("AWS_REGION")
    return RootActivityNotifier(
        directory=IamDirectory.from_region(region),
        channel=SnsChannel.from_region(region),
        settings=settings,
        logger=logger,
    )


@logger.inject_lambda_context
def lambda_handler(event, context):
    #EventBridge rule only forwards userIdentity.type == Root events here
    build_notifier().handle(event)
    return {"ok": True}
