"""
Amazon Resource Name helpers.
"""


def build_rds_arn(
    name: str,
    account_number: int | str,
    region: str = "us-east-1",
    resource_type: str = "db"
) -> str:
    """
    Build an RDS ARN: ``arn:aws:rds:<region>:<account>:<resourcetype>:<name>``.

    Dashes in the account number are removed ("6610-9521-4357" and
    "661095214357" give the same ARN).
    """
    account = str(account_number).replace("-", "")
    if not account.isdigit():
        raise ValueError(f"Invalid AWS account number: {account_number}")
    return ":".join(["arn", "aws", "rds", region, account, resource_type, name])
