import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from gds_core.models import PassengerListEntry
from gds_core.parsers import PARSERS, booking_pnr, parse, parse_first, search_passengers_list

FIXTURES = Path(__file__).resolve().parent / "fixtures" / "terminal"


def _screen(name: str) -> str:
    return (FIXTURES / f"{name}.txt").read_text(encoding="utf-8")


class SearchPassengersListTests(unittest.TestCase):
    def test_parses_every_row_of_fixture_screen(self) -> None:
        parsed = search_passengers_list(_screen("searchPassengersList"))

        self.assertIsNotNone(parsed)
        self.assertEqual(len(parsed), 22)
        self.assertEqual(sum(entry.is_cancelled for entry in parsed), 16)
        for entry in parsed:
            self.assertEqual(
                set(entry.to_dict()),
                {"id", "first_name", "last_name", "is_cancelled", "date"},
            )

    def test_rows_keep_screen_order_and_fields(self) -> None:
        parsed = search_passengers_list(_screen("searchPassengersList"))

        self.assertEqual([entry.id for entry in parsed], list(range(1, 23)))
        self.assertEqual(
            parsed[0],
            PassengerListEntry(
                id=1,
                first_name="ALEKSANDR MR",
                last_name="CHERKASOV",
                is_cancelled=True,
                date="02DEC",
            ),
        )
        self.assertFalse(parsed[2].is_cancelled)
        self.assertEqual(parsed[2].date, "21JAN")
        self.assertEqual(parsed[4].first_name, "ALEX")
        self.assertTrue(parsed[4].is_cancelled)

    def test_marker_is_read_from_its_column(self) -> None:
        screen = "\n".join(
            [
                "NAME LIST",
                "  1 SMITH/JOHN X                    15MAR",
                "  2 SMITH/JOHN                    X 15MAR",
            ]
        )
        parsed = search_passengers_list(screen)

        self.assertEqual(parsed[0].first_name, "JOHN X")
        self.assertFalse(parsed[0].is_cancelled)
        self.assertEqual(parsed[1].first_name, "JOHN")
        self.assertTrue(parsed[1].is_cancelled)

    def test_unpadded_row_keeps_name_intact(self) -> None:
        screen = "\n".join(
            [
                "NAME LIST",
                "  5 SMITH/ALEX 19SEP",
                "  6 SMITH/ALEX X 19SEP",
            ]
        )
        parsed = search_passengers_list(screen)

        self.assertEqual(
            parsed[0],
            PassengerListEntry(
                id=5, first_name="ALEX", last_name="SMITH", is_cancelled=False, date="19SEP"
            ),
        )
        self.assertEqual(parsed[1].first_name, "ALEX")
        self.assertTrue(parsed[1].is_cancelled)

    def test_rows_before_header_are_ignored(self) -> None:
        screen = "  1 SMITH/JOHN                    X 15MAR\nNAME LIST\n  2 DOE/JANE                        01JAN"
        parsed = search_passengers_list(screen)
        self.assertEqual([entry.id for entry in parsed], [2])

    def test_returns_none_if_not_parsed(self) -> None:
        self.assertIsNone(search_passengers_list("some string"))
        self.assertIsNone(search_passengers_list("NAME LIST\nNO NAMES"))
        self.assertIsNone(search_passengers_list(None))


class BookingPnrTests(unittest.TestCase):
    def test_returns_pnr_for_booking_screen(self) -> None:
        self.assertEqual(booking_pnr(_screen("bookingInUse")), "KSD38G")

    def test_returns_pnr_for_single_line_layout(self) -> None:
        self.assertEqual(booking_pnr(_screen("bookingInUse2")), "KS2814")

    def test_result_is_uppercased(self) -> None:
        self.assertEqual(booking_pnr("** this bf is currently in use **\nksd38g/40 KBPOU"), "KSD38G")

    def test_returns_none_if_cannot_parse(self) -> None:
        self.assertIsNone(booking_pnr("sdad"))
        self.assertIsNone(booking_pnr("KSD38G/40 KBPOU AG 99999992 21NOV"))
        self.assertIsNone(booking_pnr(None))


class ParserRegistryTests(unittest.TestCase):
    def test_registry_names(self) -> None:
        self.assertEqual(set(PARSERS), {"search_passengers_list", "booking_pnr"})

    def test_parse_reports_found_and_missing(self) -> None:
        hit = parse("booking_pnr", _screen("bookingInUse"))
        self.assertTrue(hit.found)
        self.assertTrue(hit)
        self.assertEqual(hit.value, "KSD38G")

        miss = parse("booking_pnr", "sdad")
        self.assertFalse(miss.found)
        self.assertFalse(miss)
        self.assertEqual(miss.parser, "booking_pnr")

    def test_parse_unknown_parser_raises(self) -> None:
        with self.assertRaises(KeyError):
            parse("no_such_screen", "text")

    def test_parse_first_picks_matching_parser(self) -> None:
        result = parse_first(_screen("bookingInUse2"))
        self.assertEqual(result.parser, "booking_pnr")
        self.assertEqual(result.value, "KS2814")

        listed = parse_first(_screen("searchPassengersList"))
        self.assertEqual(listed.parser, "search_passengers_list")

        self.assertFalse(parse_first("nothing", ["booking_pnr"]))
        self.assertIsNone(parse_first("nothing").parser)


if __name__ == "__main__":
    unittest.main()
