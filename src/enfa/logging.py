import datetime
import json

import attr

@attr.s(frozen=True)
class LogEvent:
    type = attr.ib()
    timestamp = attr.ib()
    data = attr.ib(default=None)

    def to_line(self):
        parts = [self.type, str(self.timestamp.timestamp())]
        if self.data is not None:
            parts.append(json.dumps(self.data, separators=(',', ':'), sort_keys=True))
        return ' '.join(parts)

class Logger:

    def log(self, event_type, data=None):
        raise NotImplementedError

class NullLogger(Logger):

    def log(self, event_type, data=None):
        pass

class MemoryLogger(Logger):
    """
    Keeps every event in a list so that callers can inspect what a
    conversion did.
    """

    def __init__(self):
        super().__init__()
        self.events = []

    def log(self, event_type, data=None):
        self.events.append(LogEvent(event_type, get_current_time(), data))

    def events_of_type(self, event_type):
        return [e for e in self.events if e.type == event_type]

class FileLogger(Logger):
    """
    Writes one event per line in the form ``<type> <timestamp> [<json>]``.
    """

    def __init__(self, file, flush=False):
        super().__init__()
        self.file = file
        self.flush = flush

    def log(self, event_type, data=None):
        self.file.write(LogEvent(event_type, get_current_time(), data).to_line())
        self.file.write('\n')
        if self.flush:
            self.file.flush()

class LogParseError(ValueError):
    pass

def read_log_file(file):
    return map(parse_log_line, file)

def parse_log_line(line):
    fields = line.rstrip('\n').split(' ', 2)
    if len(fields) < 2:
        raise LogParseError(f'cannot parse log line {line!r}')
    try:
        timestamp = parse_timestamp(float(fields[1]))
        data = json.loads(fields[2]) if len(fields) == 3 else None
    except ValueError:
        raise LogParseError(f'cannot parse log line {line!r}')
    return LogEvent(fields[0], timestamp, data)

def get_current_time():
    return datetime.datetime.now(datetime.timezone.utc)

def parse_timestamp(timestamp):
    return datetime.datetime.fromtimestamp(timestamp, datetime.timezone.utc)
