import unittest
from unittest.mock import patch, MagicMock

import nltk

from orangecontrib.tagpos.collection import TaggedCollection, TaggedToken, \
    plot_counts


class TaggedCollectionTests(unittest.TestCase):
    def setUp(self):
        self.collection = TaggedCollection(
            [[("dog", "NN"), ("runs", "VBZ")], None, [("Cats", "NNS")]])

    def test_as_word_tag(self):
        self.assertEqual(self.collection.as_word_tag(),
                         ["dog/NN runs/VBZ", None, "Cats/NNS"])
        self.assertEqual(str(TaggedToken("dog", "NN")), "dog/NN")

    def test_words_tags(self):
        self.assertEqual(self.collection.words(), [["dog", "runs"], None, ["Cats"]])
        self.assertEqual(self.collection.tags(), [["NN", "VBZ"], None, ["NNS"]])

    def test_sequence(self):
        self.assertEqual(len(self.collection), 3)
        self.assertEqual(self.collection[0][1], TaggedToken("runs", "VBZ"))
        self.assertEqual(self.collection[0][1].tag, "VBZ")
        self.assertIsNone(self.collection[1])
        self.assertEqual(self.collection.missing, [1])
        sliced = self.collection[1:]
        self.assertIsInstance(sliced, TaggedCollection)
        self.assertEqual(sliced.as_word_tag(), [None, "Cats/NNS"])

    def test_equality(self):
        same = TaggedCollection(
            [[TaggedToken("dog", "NN"), TaggedToken("runs", "VBZ")], None,
             [TaggedToken("Cats", "NNS")]])
        self.assertEqual(self.collection, same)
        self.assertEqual(hash(self.collection), hash(same))
        self.assertNotEqual(self.collection, self.collection[:2])

    def test_immutable(self):
        with self.assertRaises(TypeError):
            self.collection[0] = None


class RenderTests(unittest.TestCase):
    def test_short(self):
        collection = TaggedCollection(
            [[("dog", "NN"), ("runs", "VBZ")], None, [("Cats", "NNS")]])
        self.assertEqual(collection.render(width=5),
                         "1. dog/NN runs/VBZ\n2. NA\n3. Cats/NNS")
        self.assertEqual(str(collection), collection.render())

    def test_truncated(self):
        collection = TaggedCollection(
            [[("w{}".format(i), "NN")] for i in range(1, 26)])
        expected = "\n".join([
            "1.  w1/NN", "2.  w2/NN", "3.  w3/NN", "4.  w4/NN", "5.  w5/NN",
            ".", ".", ".",
            "21. w21/NN", "22. w22/NN", "23. w23/NN", "24. w24/NN",
            "25. w25/NN"])
        self.assertEqual(collection.render(width=80), expected)

    def test_threshold(self):
        collection = TaggedCollection([[("w", "NN")]] * 10)
        self.assertNotIn("\n.\n", collection.render())
        self.assertEqual(len(collection.render().splitlines()), 10)
        collection = TaggedCollection([[("w", "NN")]] * 11)
        self.assertEqual(len(collection.render().splitlines()), 13)

    def test_n(self):
        collection = TaggedCollection([[("w", "NN")]] * 7)
        lines = collection.render(n=2, width=80).splitlines()
        self.assertEqual(lines, ["1. w/NN", "2. w/NN", ".", ".", ".",
                                 "6. w/NN", "7. w/NN"])
        with self.assertRaises(ValueError):
            collection.render(n=0)

    def test_wrapping(self):
        docs = [[("alpha", "NN"), ("beta", "NN"), ("gamma", "NN")]] + \
            [[("w", "NN")]] * 9 + [None]
        collection = TaggedCollection(docs)
        lines = collection.render(width=10).splitlines()
        self.assertEqual(lines[0], "1.  alpha/NN ...")
        self.assertEqual(lines[1], "2.  w/NN")
        self.assertEqual(lines[-1], "11. NA")
        # data is not truncated
        self.assertEqual(collection.as_word_tag()[0], "alpha/NN beta/NN gamma/NN")

    def test_empty_document(self):
        collection = TaggedCollection([[]] + [[("w", "NN")]] * 10)
        self.assertEqual(collection.render(width=10).splitlines()[0], "1.  ")


class PlotTests(unittest.TestCase):
    def setUp(self):
        self.collection = TaggedCollection(
            [[("dog", "NN"), ("runs", "VBZ")], None, [("Cats", "NNS")]])

    def test_delegates(self):
        plotter = MagicMock()
        res = self.collection.plot(plotter, by=["a", "b", "a"])
        plotter.assert_called_once_with(
            [["NN", "VBZ"], [], ["NNS"]], item_name="POS Tag", by=["a", "b", "a"])
        self.assertIs(res, plotter.return_value)

    @patch.object(nltk.FreqDist, "plot")
    def test_plot_counts(self, plot):
        plot_counts([["NN", "VBZ"], [], ["NN"]], item_name="Tags", show=False)
        plot.assert_called_once_with(title="Tags", show=False)

    @patch.object(nltk.ConditionalFreqDist, "plot")
    def test_plot_counts_by(self, plot):
        plot_counts([["NN", "VBZ"], [], ["NN"]], by=["a", "b", "a"])
        plot.assert_called_once_with(title="POS Tag", show=True)
        with self.assertRaises(ValueError):
            plot_counts([["NN"]], by=["a", "b"])

    @patch("orangecontrib.tagpos.collection.nltk.FreqDist")
    def test_default_plotter(self, freq_dist):
        self.collection.plot(show=False)
        self.assertEqual(sorted(freq_dist.call_args[0][0]), ["NN", "NNS", "VBZ"])


if __name__ == "__main__":
    unittest.main()
