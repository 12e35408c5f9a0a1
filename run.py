from game_manager import create_app, games_store

app = create_app()

if __name__ == '__main__':
    host = app.config['HOST']
    port = app.config['PORT']
    app.logger.info(f"Server running on http://{host}:{port}")
    app.logger.info(f"API available at http://{host}:{port}/api")
    app.logger.info(f"{games_store.count()} games loaded in memory")
    # Handlers mutate the shared store, so serve one request at a time
    app.run(host=host, port=port, debug=app.config.get('DEBUG', False), threaded=False)
