# test_content.py
import datetime as dt
import json
import os
import tempfile
import textwrap
import unittest

from blog import tags
from blog.posts import list_posts, load_post
from engine.settings import build_theme_from_defaults, load_defaults, load_settings


class _TmpDirCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, name, text):
        path = os.path.join(self.dir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(textwrap.dedent(text).lstrip("\n"))
        return path


class TestMapTag(_TmpDirCase):
    def setUp(self):
        super().setUp()
        self._saved = dict(tags._registry)

    def tearDown(self):
        tags._registry.clear()
        tags._registry.update(self._saved)
        super().tearDown()

    def test_map_renders_yaml_as_json(self):
        path = self.write("map.yaml", """
            zoom: 4
            places:
              - name: Berlin
                lat: 52.52
        """)
        out = tags.MapTag(path).render()
        self.assertEqual(json.loads(out), {"zoom": 4, "places": [{"name": "Berlin", "lat": 52.52}]})

    def test_empty_map_renders_null(self):
        path = self.write("map.yaml", "")
        self.assertEqual(tags.MapTag(path).render(), "null")

    def test_missing_map_file(self):
        with self.assertRaises(FileNotFoundError):
            tags.MapTag(os.path.join(self.dir, "nope.yaml")).render()

    def test_map_registered_by_default(self):
        self.assertIsInstance(tags.get_tag("map"), tags.MapTag)

    def test_unknown_tag(self):
        with self.assertRaises(tags.UnknownTagError):
            tags.render_tag("no-such-tag")
        with self.assertRaises(KeyError):
            tags.get_tag("no-such-tag")

    def test_expand_tags_replaces_markers(self):
        path = self.write("map.yaml", "a: 1\n")
        tags.register_tag("map", tags.MapTag(path))
        self.assertEqual(tags.expand_tags("var map = {% map %};"), 'var map = {"a": 1};')
        self.assertEqual(tags.expand_tags("no markers"), "no markers")

    def test_unregistered_markers_left_alone(self):
        text = "{% highlight ruby %}\nputs 1\n{% endhighlight %} {% endraw %}"
        self.assertEqual(tags.expand_tags(text), text)

    def test_reregistering_same_tag_is_quiet(self):
        with self.assertLogs("blog.tags", level="DEBUG") as logs:
            tags.register_tag("map", tags.MapTag(os.path.join(self.dir, "other.yaml")))
        self.assertTrue(all(r.levelname == "DEBUG" for r in logs.records))
        self.assertEqual(tags.get_tag("map").path.name, "other.yaml")

    def test_replacing_with_other_tag_warns(self):
        class Other(tags.Tag):
            def render(self, *args):
                return ""
        with self.assertLogs("blog.tags", level="WARNING"):
            tags.register_tag("map", Other)

    def test_register_class(self):
        class Hello(tags.Tag):
            def render(self, *args):
                return "hello"
        tags.register_tag("hello", Hello)
        self.assertEqual(tags.render_tag("hello"), "hello")


class TestPosts(_TmpDirCase):
    def test_front_matter(self):
        path = self.write("2014-03-02-indexes.md", """
            ---
            title: Partial indexes
            date: 2014-03-02
            tags: [postgres, databases]
            ---
            Body line one.

            Body line two.
        """)
        post = load_post(path)
        self.assertEqual(post.title, "Partial indexes")
        self.assertEqual(post.date, dt.date(2014, 3, 2))
        self.assertEqual(post.tags, ["postgres", "databases"])
        self.assertEqual(post.body, "Body line one.\n\nBody line two.")
        self.assertEqual(post.meta_line, "2014-03-02 · postgres, databases")

    def test_no_front_matter_uses_file_name(self):
        path = self.write("lazy-enumerators.md", "Just text.\n")
        post = load_post(path)
        self.assertEqual(post.title, "lazy enumerators")
        self.assertIsNone(post.date)
        self.assertEqual(post.tags, [])
        self.assertEqual(post.meta_line, "")

    def test_string_tags(self):
        path = self.write("p.md", """
            ---
            tags: ruby tooling
            ---
            x
        """)
        self.assertEqual(load_post(path).tags, ["ruby", "tooling"])

    def test_front_matter_must_be_mapping(self):
        path = self.write("bad.md", """
            ---
            - just
            - a list
            ---
            x
        """)
        with self.assertRaisesRegex(ValueError, "bad.md: front matter must be a mapping"):
            load_post(path)

    def test_unterminated_front_matter(self):
        path = self.write("open.md", """
            ---
            title: oops
            body without closing fence
        """)
        with self.assertRaisesRegex(ValueError, "unterminated"):
            load_post(path)

    def test_bad_date(self):
        path = self.write("d.md", """
            ---
            date: someday
            ---
            x
        """)
        with self.assertRaisesRegex(ValueError, "bad date"):
            load_post(path)

    def test_tags_in_body_expanded(self):
        saved = dict(tags._registry)
        try:
            map_path = self.write("map.yaml", "zoom: 3\n")
            tags.register_tag("map", tags.MapTag(map_path))
            path = self.write("m.md", "data: {% map %}\n")
            self.assertEqual(load_post(path).body, 'data: {"zoom": 3}')
            self.assertEqual(load_post(path, expand=False).body, "data: {% map %}")
        finally:
            tags._registry.clear()
            tags._registry.update(saved)

    def test_list_posts_with_code_blocks(self):
        self.write("a.md", """
            ---
            date: 2014-06-14
            ---
            {% highlight ruby %}
            (1..3).lazy.map { |n| n * 2 }
            {% endhighlight %}
        """)
        self.write("b.md", "plain\n")
        posts = list_posts(self.dir)
        self.assertEqual([os.path.basename(p.path) for p in posts], ["a.md", "b.md"])
        self.assertIn("{% endhighlight %}", posts[0].body)

    def test_list_posts_sorted_by_date(self):
        self.write("b.md", "---\ndate: 2014-06-14\n---\nlater\n")
        self.write("a.md", "---\ndate: 2014-03-02\n---\nearlier\n")
        self.write("c.md", "undated\n")
        self.write("notes.yaml", "ignored: true\n")
        names = [os.path.basename(p.path) for p in list_posts(self.dir)]
        self.assertEqual(names, ["a.md", "b.md", "c.md"])


class TestSettings(_TmpDirCase):
    def test_missing_file_gives_defaults(self):
        cfg = load_settings(os.path.join(self.dir, "missing.yaml"))
        self.assertEqual(cfg.fps, 60)
        self.assertEqual(cfg.input.scroll_wheel_pixels, 40)
        self.assertEqual(cfg.site.posts_dir, "blog/_posts")

    def test_overrides(self):
        path = self.write("cfg.yaml", """
            fps: 30
            window:
              width: 800
            input:
              page_scroll_frac: 0.5
            site:
              title: notes
        """)
        cfg = load_settings(path)
        self.assertEqual(cfg.fps, 30)
        self.assertEqual(cfg.window.width, 800)
        self.assertEqual(cfg.window.height, 720)
        self.assertEqual(cfg.input.page_scroll_frac, 0.5)
        self.assertEqual(cfg.site.title, "notes")

    def test_top_level_must_be_mapping(self):
        path = self.write("cfg.yaml", "- 1\n- 2\n")
        with self.assertRaises(ValueError):
            load_defaults(path)

    def test_theme_from_defaults(self):
        th = build_theme_from_defaults({
            "theme": {
                "font_size": 18,
                "progress_bar": {"height": 6, "fill_rgb": [1, 2, 3], "show_track": False},
                "header": {"height": 0, "rule_rgb": None},
            }
        })
        self.assertEqual(th.font_size, 18)
        self.assertEqual(th.progress_bar.height, 6)
        self.assertEqual(th.progress_bar.fill_rgb, (1, 2, 3))
        self.assertFalse(th.progress_bar.show_track)
        self.assertEqual(th.header.height, 0)
        self.assertIsNone(th.header.rule_rgb)

    def test_shipped_config_loads(self):
        root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
        cfg = load_settings(os.path.join(root, "blog", "config", "defaults.yaml"))
        self.assertEqual(cfg.site.map_path, "blog/map.yaml")


if __name__ == "__main__":
    unittest.main()
