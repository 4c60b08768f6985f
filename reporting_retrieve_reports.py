# reporting_retrieve_reports.py
import io
import sys
from typing import Any, List

from googleapiclient.http import MediaIoBaseDownload

from auth_helper import authorize
from sample_runner import print_banner, print_fields, print_separator, prompt, run_sample, safe_print
from youtube_client import build_reporting

SCOPES = ["https://www.googleapis.com/auth/yt-analytics-monetary.readonly"]
REPORT_FILENAME = "report"


def list_reporting_jobs(reporting: Any) -> List[dict]:
    jobs = reporting.jobs().list().execute().get("jobs") or []
    if not jobs:
        safe_print("No jobs found.")
        return []
    print_banner("Reporting Jobs")
    for job in jobs:
        print_fields(("Id", job.get("id")), ("Name", job.get("name")), ("Report Type Id", job.get("reportTypeId")))
        print_separator()
    return jobs


def retrieve_reports(reporting: Any, job_id: str) -> List[dict]:
    reports = reporting.jobs().reports().list(jobId=job_id).execute().get("reports") or []
    if not reports:
        safe_print("No reports found.")
        return []
    safe_print(f"\n============= Reports for the job {job_id} =============\n")
    for report in reports:
        print_fields(
            ("Id", report.get("id")),
            ("From", report.get("startTime")),
            ("To", report.get("endTime")),
            ("Download Url", report.get("downloadUrl")),
        )
        print_separator()
    return reports


def download_report(reporting: Any, report_url: str, path: str = REPORT_FILENAME) -> str:
    """Download `report_url` into `path` through the authorized reporting client."""
    request = reporting.media().download_media(resourceName=" ")
    # the download url replaces the placeholder resource uri
    request.uri = report_url
    with io.FileIO(path, mode="wb") as fh:
        downloader = MediaIoBaseDownload(fh, request, chunksize=-1)
        done = False
        while not done:
            status, done = downloader.next_chunk()
            if status:
                safe_print(f"Download {int(status.progress() * 100)}%.")
    safe_print("Report saved to", path)
    return path


def main(argv=None) -> int:
    def body():
        reporting = build_reporting(authorize(SCOPES, "retrievereports"))
        if not list_reporting_jobs(reporting):
            return
        job_id = prompt("Please enter the job id for the report retrieval: ", required_message="Job id can't be empty!")
        safe_print(f"You chose {job_id} as the job Id for the report retrieval.")
        if not retrieve_reports(reporting, job_id):
            return
        report_url = prompt("Please enter the report URL to download: ", required_message="Report URL can't be empty!")
        safe_print(f"You chose {report_url} as the URL to download.")
        download_report(reporting, report_url)

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
