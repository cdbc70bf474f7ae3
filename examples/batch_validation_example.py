"""Example: Validating identity records

This example shows single-record validation with localized errors, batch
validation with a custom rule, and redaction before logging or export.
"""

from somalid import (
    Rule,
    ValidationError,
    redact,
    validate_batch,
    validate_record,
    validate_record_multilingual,
)

RECORDS = [
    {
        "id_number": "9342 6578 2412",
        "name": "Ahmed Hassan Mohamed",
        "sex": "M",
        "dob": "15-03-1990",
        "issue": "01-01-2020",
        "expiry": "01-01-2099",
    },
    {
        "idNumber": "12345",
        "name": "Faadumo Cali",
        "sex": "Female",
        "dobDMY": "02/11/1985",
        "issueDMY": "2019-05-20",
        "expiryDMY": "20.05.2099",
    },
    {
        "id_number": "934265782412",
        "name": "Cabdi Xasan",
        "sex": "m",
        "dob": "1992-07-01",
        "issue": "30-06-1990",
        "expiry": "01-01-2099",
    },
]


def single_record() -> None:
    record = validate_record(RECORDS[0])
    print("Normalized:", record.masked())

    try:
        validate_record_multilingual(RECORDS[2], language="so")
    except ValidationError as e:
        print(f"{e.code.value}: {e.localized_message}")
        print("Arabic:", e.arabic_message)


def batch() -> None:
    result = validate_batch(RECORDS, language="ar")
    print(result.format())

    strict = Rule(id_must_start="93", name_max_length=60)
    print("Strict rule:", validate_batch(RECORDS, strict).summary.to_dict())


def redaction() -> None:
    for record in RECORDS:
        print(redact(record))


if __name__ == "__main__":
    single_record()
    batch()
    redaction()
