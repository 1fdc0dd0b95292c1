import argparse
import logging
import sys

from examslots.config import ScheduleConfig
from examslots.errors import EmptyInputError
from examslots.io_utils import read_text
from examslots.pipeline import generate_schedule
from examslots.scheduling.evaluation import schedule_frame, summary
from examslots.scheduling.student_timetable import student_timetable


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="ExamSlots – conflict-free exam slot assignment")
    # Inputs
    p.add_argument('--students', type=str, required=True,
                   help='Enrollment file, one student per line (ID: C1, C2 or ID,C1,C2)')
    p.add_argument('--courses', type=str, required=True,
                   help='Course list, comma and/or newline separated')

    # Display
    p.add_argument('--sessions_per_day', type=int, default=3)
    p.add_argument('--student', type=str, default=None, help='Print the timetable of one student')
    p.add_argument('--trace', action='store_true', help='Print the slot assignment narration')
    p.add_argument('--verbose', action='store_true')

    # Output
    p.add_argument('--out_schedule', type=str, default='schedule.csv')
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )
    config = ScheduleConfig(sessions_per_day=args.sessions_per_day)

    try:
        result = generate_schedule(read_text(args.students), read_text(args.courses),
                                   config=config, collect_events=args.trace)
    except EmptyInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.trace:
        for ev in result.events:
            print(f"[{ev.phase}] {ev.course or '-'}: {ev.detail}")
        print()

    print(summary(result))

    schedule_frame(result).to_csv(args.out_schedule, index=False)
    print(f"Saved: {args.out_schedule}")

    if args.student:
        try:
            tt = student_timetable(result, args.student, config=config)
        except KeyError:
            print(f"Error: no student matching {args.student!r}", file=sys.stderr)
            return 2
        print(f"Student {tt.student.id}: {len(tt.entries)} exams in {tt.unique_slots} slots "
              f"over {tt.max_day} days, {tt.conflicts} conflicts among own courses")
        for e in tt.entries:
            print(f"  Slot {e.slot} ({e.label}): {e.course}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
