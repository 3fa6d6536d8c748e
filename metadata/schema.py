ACTIVITY_EVENT_SCHEMA = {
    "detail.eventName": "string (API action or ConsoleLogin)",
    "detail.userIdentity.type": "string (Root)",
    "detail.userIdentity.accountId": "string (12 digit account id)",
    "region": "string (aws region code)",
    "time": "string (YYYY-MM-DDTHH:MM:SSZ, UTC)",
}

REQUIRED_PATHS = tuple(ACTIVITY_EVENT_SCHEMA.keys())

EVENT_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

ACCOUNT_ID_PATH = "detail.userIdentity.accountId"
