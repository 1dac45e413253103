import unittest
import datetime
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from error_messages import EventParseError
from event_parser import (
    align_timezone, get_event_id, get_event_name, parse_event_range, parse_event_time,
)

KST = datetime.timezone(datetime.timedelta(hours=9))


class TestParseEventTime(unittest.TestCase):

    def test_naive_iso_string(self):
        """시간대 없는 ISO 문자열은 그대로 naive datetime이 됩니다."""
        self.assertEqual(parse_event_time("2025-08-15T09:30:00"), datetime.datetime(2025, 8, 15, 9, 30))

    def test_utc_string_converted_to_zone(self):
        """UTC 문자열은 기준 시간대로 변환됩니다."""
        value = parse_event_time("2025-08-15T00:30:00Z", KST)
        self.assertEqual(value, datetime.datetime(2025, 8, 15, 9, 30, tzinfo=KST))
        self.assertEqual(value.utcoffset(), datetime.timedelta(hours=9))

    def test_naive_value_gets_zone_attached(self):
        """naive 값은 기준 시간대의 벽시계 시각으로 간주합니다."""
        value = parse_event_time("2025-08-15T09:30:00", KST)
        self.assertEqual(value.tzinfo, KST)
        self.assertEqual(value.hour, 9)

    def test_aware_value_without_zone_becomes_naive(self):
        """기준 시간대가 없으면 aware 값은 로컬 시간 naive로 바뀝니다."""
        value = align_timezone(datetime.datetime(2025, 8, 15, 0, 0, tzinfo=datetime.timezone.utc))
        self.assertIsNone(value.tzinfo)

    def test_date_and_dict_values(self):
        """date 값과 {'dateTime': ...} / {'date': ...} 형태도 받습니다."""
        self.assertEqual(parse_event_time(datetime.date(2025, 8, 15)), datetime.datetime(2025, 8, 15))
        self.assertEqual(parse_event_time({'dateTime': "2025-08-15T10:00:00"}),
                         datetime.datetime(2025, 8, 15, 10))
        self.assertEqual(parse_event_time({'date': "2025-08-15"}), datetime.datetime(2025, 8, 15))

    def test_invalid_values_raise(self):
        """읽을 수 없는 값은 EventParseError를 던집니다."""
        for value in ("not-a-date", "", "   ", None, 12345, "2025-13-45T99:00:00", {}):
            with self.subTest(value=value):
                with self.assertRaises(EventParseError):
                    parse_event_time(value)

    def test_out_of_range_conversion_raises(self):
        """시간대 변환 결과가 datetime 범위를 벗어나면 EventParseError를 던집니다."""
        kst = datetime.timezone(datetime.timedelta(hours=9))
        with self.assertRaises(EventParseError):
            parse_event_time("9999-12-31T23:00:00-05:00", kst)


class TestEventFields(unittest.TestCase):

    def test_event_id_fallback(self):
        """publicId, id 순으로 찾고 없으면 temp-<index>를 씁니다."""
        self.assertEqual(get_event_id({'publicId': 'p-1', 'id': 'x'}, 0), 'p-1')
        self.assertEqual(get_event_id({'id': 42}, 0), 42)
        self.assertEqual(get_event_id({'publicId': ''}, 3), 'temp-3')
        self.assertEqual(get_event_id({}, 5), 'temp-5')

    def test_event_name(self):
        self.assertEqual(get_event_name({'eventName': 'Orientation'}), 'Orientation')
        self.assertEqual(get_event_name({'summary': 'Standup'}), 'Standup')
        self.assertEqual(get_event_name({}, '(No title)'), '(No title)')

    def test_parse_event_range_aliases(self):
        """start/end 별칭 키도 받습니다."""
        start, end = parse_event_range({'start': "2025-08-15T09:00:00", 'end': "2025-08-15T10:00:00"})
        self.assertEqual(end - start, datetime.timedelta(hours=1))

    def test_parse_event_range_missing_end(self):
        with self.assertRaises(EventParseError):
            parse_event_range({'startTime': "2025-08-15T09:00:00"})


if __name__ == '__main__':
    unittest.main()
