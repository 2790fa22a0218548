import unittest
from irctokens import hostmask
from globmatch import GlobParams, Mask, MaskOr

class MaskTestMatch(unittest.TestCase):
    def test_match(self):
        mask = Mask("*!*@*.example.com")
        self.assertTrue(mask.match(hostmask("nick!user@irc.example.com")))
        self.assertFalse(mask.match(hostmask("nick!user@example.org")))

    def test_nickname(self):
        mask = Mask("ni?k!*@*")
        self.assertTrue(mask.match(hostmask("nick!user@host")))
        self.assertTrue(mask.match(hostmask("nipk!user@host")))
        self.assertFalse(mask.match(hostmask("nicks!user@host")))

    def test_case(self):
        mask = Mask("Nick!*@*")
        self.assertFalse(mask.match(hostmask("nick!user@host")))

    def test_repr(self):
        self.assertEqual(repr(Mask("*!*@host")), "Mask('*!*@host')")

    def test_charset(self):
        mask = Mask("[jt]esopo!*@*")
        self.assertTrue(mask.match(hostmask("tesopo!u@h")))
        literal = Mask("[jt]esopo!*@*", GlobParams(charsets=False))
        self.assertFalse(literal.match(hostmask("tesopo!u@h")))
        self.assertTrue(literal.match(hostmask("[jt]esopo!u@h")))

class MaskTestOr(unittest.TestCase):
    def test(self):
        masks = MaskOr(Mask("a!*@*"), Mask("*!*@b"))
        self.assertTrue(masks.match(hostmask("a!user@host")))
        self.assertTrue(masks.match(hostmask("nick!user@b")))
        self.assertFalse(masks.match(hostmask("nick!user@host")))
        self.assertFalse(MaskOr().match(hostmask("a!b@c")))
