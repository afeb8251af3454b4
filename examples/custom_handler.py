# Drives a Responder by hand: JSON for /health, files for everything else,
# with a plain-text fallback instead of the site error page.
import statica

provider = statica.FileSystemProvider("public")


async def handler(req, res):
    if req.path == "/health":
        res.send({"ok": True})
        return
    if req.path == "/old":
        res.redirect("/", 302)
        return

    transfer = await res.send_file(req.path)
    if not transfer.ok:
        res.ext("txt").send(f"{req.path} not found")


app = statica.Endpoint(handler, provider)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app)
