"""
OS-level schedule config generators.

These are plain functions that produce config text for systemd, cron and
launchd. They do NOT run jobs; ``teamlog schedule`` prints their output
for an operator to install.
"""

import getpass
import shlex
from pathlib import Path
from typing import Tuple

from .base import ScheduledJob, ScheduleType


def _command_line(job: ScheduledJob, executable: str) -> str:
    # executable may carry its own arguments ("python -m teamlog")
    return " ".join([executable, *(shlex.quote(part) for part in job.command)])


def generate_launchd_plist(job: ScheduledJob, project_root: Path, executable: str) -> str:
    """Generate a macOS launchd plist for a scheduled job."""
    label = f"com.teamlog.{job.name}"
    log_dir = project_root / "logs"

    if job.schedule_type == ScheduleType.INTERVAL:
        interval_xml = (
            f"    <key>StartInterval</key>\n"
            f"    <integer>{job.interval_seconds}</integer>"
        )
    else:
        # launchd takes one calendar interval per plist; use the first time
        t = job.daily_times[0]
        interval_xml = (
            f"    <key>StartCalendarInterval</key>\n"
            f"    <dict>\n"
            f"        <key>Hour</key>\n"
            f"        <integer>{t.hour}</integer>\n"
            f"        <key>Minute</key>\n"
            f"        <integer>{t.minute}</integer>\n"
            f"    </dict>"
        )

    arguments = "\n".join(
        f"        <string>{part}</string>" for part in [*executable.split(), *job.command]
    )
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN"
  "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
    <key>Label</key>
    <string>{label}</string>
    <key>ProgramArguments</key>
    <array>
{arguments}
    </array>
    <key>WorkingDirectory</key>
    <string>{project_root}</string>
{interval_xml}
    <key>StandardOutPath</key>
    <string>{log_dir}/{job.name}.log</string>
    <key>StandardErrorPath</key>
    <string>{log_dir}/{job.name}.err</string>
</dict>
</plist>
"""


def generate_systemd_units(
    job: ScheduledJob, project_root: Path, executable: str
) -> Tuple[str, str]:
    """Generate systemd service + timer unit files. Returns (service, timer)."""
    user = getpass.getuser()

    service = f"""[Unit]
Description=teamlog {job.name}

[Service]
Type=oneshot
User={user}
WorkingDirectory={project_root}
ExecStart={_command_line(job, executable)}

[Install]
WantedBy=multi-user.target
"""

    if job.schedule_type == ScheduleType.INTERVAL:
        timer_schedule = (
            f"OnBootSec={job.first_delay_seconds}s\n"
            f"OnUnitActiveSec={job.interval_seconds}s"
        )
    else:
        timer_schedule = "\n".join(
            f"OnCalendar=*-*-* {t.hour:02d}:{t.minute:02d}:00" for t in job.daily_times
        )

    timer = f"""[Unit]
Description=Timer for teamlog {job.name}

[Timer]
{timer_schedule}
Persistent=true

[Install]
WantedBy=timers.target
"""

    return service, timer


def generate_crontab_entry(job: ScheduledJob, project_root: Path, executable: str) -> str:
    """Generate a crontab entry for the job."""
    cmd = f"cd {shlex.quote(str(project_root))} && {_command_line(job, executable)}"

    if job.schedule_type == ScheduleType.INTERVAL:
        minutes = max(1, (job.interval_seconds or 1800) // 60)
        return f"*/{minutes} * * * * {cmd}  # {job.name}"
    return "\n".join(
        f"{t.minute} {t.hour} * * * {cmd}  # {job.name}" for t in job.daily_times
    )
