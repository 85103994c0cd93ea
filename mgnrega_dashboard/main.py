"""
Main entry point for the worker dashboard application.

This module provides a convenient way to run a dashboard instance.
"""

from mgnrega_dashboard import DashboardConfig, WorkerDashboard
from mgnrega_dashboard.charts import DISTRICT_DATA
from mgnrega_dashboard.config import API_URL_ENV, default_api_url
from mgnrega_dashboard.logger import setup_logging


def main(argv=None):
    """Run the dashboard with command-line arguments."""
    import argparse

    parser = argparse.ArgumentParser(description="MGNREGA Worker Dashboard")
    parser.add_argument(
        "--api-url",
        type=str,
        default=default_api_url(),
        help=f"Worker API base URL (default: ${API_URL_ENV} or the hosted backend)",
    )
    parser.add_argument(
        "--api-host", type=str, default="0.0.0.0", help="Dashboard server host"
    )
    parser.add_argument(
        "--api-port", "-p", type=int, default=8000, help="Dashboard server port"
    )
    parser.add_argument(
        "--district",
        type=str,
        default="Madurai",
        choices=list(DISTRICT_DATA),
        help="District shown in the chart at startup",
    )
    parser.add_argument(
        "--no-load",
        action="store_true",
        help="Do not fetch workers on startup",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Log level",
    )

    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    # Create dashboard configuration
    config = DashboardConfig(
        api_url=args.api_url,
        api_host=args.api_host,
        api_port=args.api_port,
        default_district=args.district,
        load_on_startup=not args.no_load,
        log_level=args.log_level,
    )

    dashboard = WorkerDashboard(config)
    dashboard.run()


if __name__ == "__main__":
    main()
