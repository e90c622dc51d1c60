# Startup: configuration resolution, license gate, listener
