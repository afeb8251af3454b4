# Serves ./public with a custom 404 page and per-file cache headers.
import statica

site = statica.StaticSite(
    {
        "root": "public",
        "error_page": "/404.html",
        "cache_control": {
            "index.html": False,
            "app.js": 86400,
            "account.html": "private, max-age=300",
        },
    }
)

if __name__ == "__main__":
    site.run()
