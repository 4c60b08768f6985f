# reporting_create_job.py
import sys
from typing import Any, List

from auth_helper import authorize
from sample_runner import print_banner, print_fields, print_separator, prompt, run_sample, safe_print
from youtube_client import build_reporting

SCOPES = ["https://www.googleapis.com/auth/yt-analytics-monetary.readonly"]
DEFAULT_JOB_NAME = "pythonTestJob"


def list_report_types(reporting: Any) -> List[dict]:
    """Print the available report types and return them."""
    report_types = reporting.reportTypes().list().execute().get("reportTypes") or []
    if not report_types:
        safe_print("No report types found.")
        return []
    print_banner("Report Types")
    for report_type in report_types:
        print_fields(("Id", report_type.get("id")), ("Name", report_type.get("name")))
        print_separator()
    return report_types


def create_reporting_job(reporting: Any, report_type_id: str, name: str) -> dict:
    job = reporting.jobs().create(body={"reportTypeId": report_type_id, "name": name}).execute()
    print_banner("Created reporting job")
    print_fields(
        ("ID", job.get("id")),
        ("Name", job.get("name")),
        ("Report Type Id", job.get("reportTypeId")),
        ("Create Time", job.get("createTime")),
    )
    print_separator()
    return job


def main(argv=None) -> int:
    def body():
        reporting = build_reporting(authorize(SCOPES, "createreportingjob"))
        name = prompt(f"Please enter the name for the job [{DEFAULT_JOB_NAME}]: ", default=DEFAULT_JOB_NAME)
        safe_print(f"You chose {name} as the name for the job.")
        if list_report_types(reporting):
            report_type_id = prompt("Please enter the reportTypeId for the job: ",
                                    required_message="Report type id can't be empty!")
            safe_print(f"You chose {report_type_id} as the report type Id for the job.")
            create_reporting_job(reporting, report_type_id, name)

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
