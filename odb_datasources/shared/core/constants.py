# Infrastructure Constants
# Regions where Oracle Database@AWS exposes the ODB control plane.
AWS_SUPPORTED_REGIONS = [
    "us-east-1",
    "us-west-2",
    "eu-central-1",
    "ap-northeast-1",
]

DEFAULT_AWS_REGION = "us-east-1"

# Service naming used in read diagnostics
ODB_SERVICE_NAME = "odb"
ODB_SERVICE_HUMAN_NAME = "Oracle Database@AWS"
ERR_ACTION_READING = "reading"

# Placeholder written when an optional timestamp is not reported
NOT_AVAILABLE_VALUE = "NA"
