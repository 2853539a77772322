import argparse
import logging
import sys

from engine.app import ReaderApp
from engine.settings import DEFAULTS_PATH, load_settings
from blog.posts import list_posts, load_post
from blog.scenes.post import PostScene
from blog.tags import MapTag, register_tag

logger = logging.getLogger("blog")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Read a blog post with a scroll progress bar.")
    parser.add_argument("post", nargs="?", help="post file (default: newest post in site.posts_dir)")
    parser.add_argument("--config", default=DEFAULTS_PATH, help="YAML settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_settings(args.config)
    register_tag(MapTag.name, MapTag(cfg.site.map_path))

    try:
        if args.post:
            post = load_post(args.post)
        else:
            posts = list_posts(cfg.site.posts_dir)
            if not posts:
                logger.error("No posts found in %s", cfg.site.posts_dir)
                return 1
            post = posts[-1]
    except (OSError, ValueError) as e:
        logger.error("Could not load post: %s", e)
        return 1

    logger.info("Opening '%s'", post.title)
    app = ReaderApp(cfg)
    app.open(PostScene(app.scenes, cfg, post, config_path=args.config))
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
