import logging

from spotify_gateway import create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()


print("Registered routes:")
for rule in app.url_map.iter_rules():
    print(f"{rule} -> endpoint={rule.endpoint} methods={sorted(rule.methods)}")

if __name__ == "__main__":
    app.run(debug=app.debug)
