import unittest

import mediatype.accept

from mediatype.mediatype import MediaType

class TestMediaRange(unittest.TestCase):
    def test_parse(self):
        r = mediatype.accept.MediaRange.parse(" text/html; level=1; q=0.5 ")
        self.assertEqual(r.q, 0.5)
        self.assertEqual(r.media_type, MediaType("text", "html",
                                                 {"level": "1"}))
        self.assertEqual(r.specifity, 1)

    def test_default_quality(self):
        r = mediatype.accept.MediaRange.parse("text/html")
        self.assertEqual(r.q, 1.0)

    def test_quality_name_ignores_case(self):
        r = mediatype.accept.MediaRange.parse("text/html;Q=0.2")
        self.assertEqual(r.q, 0.2)
        self.assertEqual(len(r.media_type.parameters), 0)

    def test_invalid_quality(self):
        with self.assertRaises(ValueError):
            mediatype.accept.MediaRange.parse("text/html;q=high")

    def test_wildcards(self):
        P = mediatype.accept.MediaRange.parse
        self.assertEqual(P("*/*").wildcards, 2)
        self.assertEqual(P("*/*").specifity, -2)
        self.assertEqual(P("text/*").wildcards, 1)
        self.assertEqual(P("text/plain").wildcards, 0)

    def test_match_ignores_unnamed_parameters(self):
        r = mediatype.accept.MediaRange.parse("text/html")
        self.assertTrue(r.match(MediaType.parse("text/html; level=1")))

    def test_match_requires_named_parameters(self):
        r = mediatype.accept.MediaRange.parse("text/html; level=1")
        self.assertFalse(r.match(MediaType.parse("text/html")))
        self.assertFalse(r.match(MediaType.parse("text/html; level=2")))
        self.assertTrue(r.match(MediaType.parse("text/html; Level=1")))


class TestAcceptList(unittest.TestCase):
    def _test_list(self, preflist, expected_qualities):
        for candidate, q in expected_qualities:
            calculatedq = preflist.get_quality(candidate)
            self.assertEqual(
                q,
                calculatedq,
                msg="{0!s} did not get the correct q-value: {1}"
                " expected, {2} calculated".format(
                    candidate,
                    q,
                    calculatedq
                ))

    def test_parsing(self):
        P = mediatype.accept.MediaRange
        header = """text/plain; q=0.5, text/html,
                    text/x-dvi; q=0.8, text/x-c"""
        l = mediatype.accept.AcceptList()
        l.append_header(header)
        self.assertSequenceEqual(
            list(l),
            [
                P(MediaType("text", "plain"), q=0.5),
                P(MediaType("text", "html"), q=1.0),
                P(MediaType("text", "x-dvi"), q=0.8),
                P(MediaType("text", "x-c"), q=1.0),
            ]
        )

    def test_malformed_ranges_are_skipped(self):
        l = mediatype.accept.AcceptList()
        with self.assertLogs("mediatype.accept", level="WARNING"):
            l.append_header("text/plain, text html, text/x;q=x, "
                            "text/y;a=1;A=2")
        self.assertEqual(len(l), 1)

    def test_empty_header(self):
        l = mediatype.accept.AcceptList()
        l.append_header("")
        l.append_header(None)
        self.assertEqual(len(l), 0)
        self.assertEqual(l.get_quality(MediaType("text", "plain")), 0)

    def test_rfc_compliance(self):
        l = mediatype.accept.AcceptList()
        l.append_header("""text/*;q=0.3, text/html;q=0.7, text/html;level=1,
               text/html;level=2;q=0.4, */*;q=0.5""")

        P = MediaType.parse
        expected_qualities = [
            (P("text/html;level=1"),      1.0),
            (P("text/html"),              0.7),
            (P("text/plain"),             0.3),
            (P("image/jpeg"),             0.5),
            (P("text/html;level=2"),      0.4),
            (P("text/html;level=3"),      0.7),
        ]
        self._test_list(l, expected_qualities)

    def test_best_match(self):
        l = mediatype.accept.AcceptList()
        l.append_header("""image/png;q=0.9, text/plain;q=1.0""")

        P = MediaType.parse
        self.assertEqual(
            l.best_match([P("image/png"), P("text/plain")]),
            P("text/plain"))

    def test_best_match_prefers_earlier_on_ties(self):
        l = mediatype.accept.AcceptList()
        l.append_header("application/*")

        P = MediaType.parse
        self.assertEqual(
            l.best_match([P("application/xml"), P("application/json")]),
            P("application/xml"))

    def test_best_match_without_acceptable(self):
        l = mediatype.accept.AcceptList()
        l.append_header("application/json, text/*;q=0")
        self.assertIsNone(l.best_match([MediaType("text", "plain"),
                                        MediaType("image", "png")]))

    def test_all_media_types(self):
        l = mediatype.accept.all_media_types()
        self.assertEqual(l.get_quality(MediaType("image", "png")), 1.0)
