from aws_lambda_powertools import Logger

# one logger for the whole function so every line carries the same service
# name and, once the entry point injects it, the Lambda request id
logger = Logger(service="root-activity-alert")
