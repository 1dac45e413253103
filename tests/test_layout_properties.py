import unittest
import datetime
import itertools
import random
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from views.layout_calculator import calculate_day_layout

DAY = datetime.date(2025, 8, 15)
MIDNIGHT = datetime.datetime.combine(DAY, datetime.time.min)
SEED = 20250815


def random_events(rng, count, first_minute=300, last_minute=1440, max_duration=180):
    """분 단위 임의 일정. 일부는 창 앞뒤로 걸치거나 완전히 벗어난다."""
    events = []
    for i in range(count):
        start = rng.randrange(first_minute, last_minute, 5)
        duration = rng.randrange(5, max_duration + 1, 5)
        events.append({
            'publicId': f"ev-{i}",
            'startTime': (MIDNIGHT + datetime.timedelta(minutes=start)).isoformat(),
            'endTime': (MIDNIGHT + datetime.timedelta(minutes=start + duration)).isoformat(),
        })
    return events


def overlaps(a, b):
    return a.clamped_start < b.clamped_end and b.clamped_start < a.clamped_end


def clusters(normalized):
    """직접/연쇄 겹침으로 이어진 묶음 (union-find)"""
    parent = list(range(len(normalized)))

    def find(i):
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    for i, j in itertools.combinations(range(len(normalized)), 2):
        if overlaps(normalized[i], normalized[j]):
            parent[find(i)] = find(j)

    groups = {}
    for i, event in enumerate(normalized):
        groups.setdefault(find(i), []).append(event)
    return list(groups.values())


def brute_force_chromatic_number(events):
    """백트래킹으로 구한 최소 색 수 (작은 묶음 전용 기준값)"""
    n = len(events)
    conflicts = [[overlaps(events[i], events[j]) for j in range(n)] for i in range(n)]

    def colorable(k):
        colors = [-1] * n

        def place(i):
            if i == n:
                return True
            for color in range(k):
                if all(not (conflicts[i][j] and colors[j] == color) for j in range(i)):
                    colors[i] = color
                    if place(i + 1):
                        return True
            colors[i] = -1
            return False

        return place(0)

    for k in range(1, n + 1):
        if colorable(k):
            return k
    return 0


class TestLayoutProperties(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(SEED)

    def test_no_collision_within_a_column(self):
        """같은 열의 두 일정은 시간이 겹치지 않습니다."""
        for _ in range(50):
            result = calculate_day_layout(random_events(self.rng, 25), DAY)
            laid_out = list(result.items.values())
            for a, b in itertools.combinations(laid_out, 2):
                if overlaps(a.normalized, b.normalized):
                    self.assertNotEqual(a.assignment.column_index, b.assignment.column_index,
                                        f"{a.event_id} / {b.event_id}")

    def test_geometry_stays_inside_window(self):
        """모든 좌표는 0 ~ 100% 안이고 top + height는 100%를 넘지 않습니다."""
        for _ in range(50):
            result = calculate_day_layout(random_events(self.rng, 30), DAY)
            for item in result.items.values():
                layout = item.layout
                for value in (layout.top, layout.height, layout.left, layout.width):
                    self.assertGreaterEqual(value, 0.0)
                    self.assertLessEqual(value, 100.0)
                self.assertLessEqual(layout.top + layout.height, 100.0 + 1e-9)
                self.assertLessEqual(layout.left + layout.width, 100.0 + 1e-9)

    def test_lane_count_is_minimal(self):
        """묶음 안의 최대 열 수는 브루트포스로 구한 최소 색 수와 같습니다."""
        checked = 0
        for _ in range(200):
            # 좁은 시간대에 몰아서 겹침 묶음을 만든다
            result = calculate_day_layout(
                random_events(self.rng, 7, first_minute=540, last_minute=720, max_duration=90), DAY)
            normalized = [item.normalized for item in result.items.values()]
            for cluster in clusters(normalized):
                expected = brute_force_chromatic_number(cluster)
                actual = max(result.items[e.event_id].assignment.num_columns for e in cluster)
                self.assertEqual(actual, expected)
                checked += 1
        self.assertGreater(checked, 0)

    def test_input_order_does_not_change_layout(self):
        """같은 일정을 섞어서 넣어도 결과는 같습니다."""
        for _ in range(30):
            events = random_events(self.rng, 20)
            # 시작 시각이 같은 일정을 일부러 추가
            events.append(dict(events[0], publicId="ev-twin"))
            shuffled = events[:]
            self.rng.shuffle(shuffled)

            first = calculate_day_layout(events, DAY)
            second = calculate_day_layout(shuffled, DAY)
            self.assertEqual(list(first.items), list(second.items))
            for event_id, item in first.items.items():
                self.assertEqual(item.assignment, second.items[event_id].assignment)
                self.assertEqual(item.layout, second.items[event_id].layout)

    def test_events_outside_window_never_appear(self):
        """창 밖 일정은 결과에 없고, 창 안 일정은 잘리지 않습니다."""
        window_start = MIDNIGHT + datetime.timedelta(hours=6)
        window_end = MIDNIGHT + datetime.timedelta(hours=23, minutes=30)
        for _ in range(30):
            events = random_events(self.rng, 20, first_minute=0, last_minute=1440)
            result = calculate_day_layout(events, DAY)
            for event in events:
                start = datetime.datetime.fromisoformat(event['startTime'])
                end = datetime.datetime.fromisoformat(event['endTime'])
                if end <= window_start or start >= window_end:
                    self.assertNotIn(event['publicId'], result.items)
                elif window_start <= start and end <= window_end:
                    normalized = result.items[event['publicId']].normalized
                    self.assertEqual(normalized.clamped_start, start)
                    self.assertEqual(normalized.clamped_end, end)


if __name__ == '__main__':
    unittest.main()
