from policy_repro.api.main import app

if __name__ == "__main__":
    import os
    import uvicorn
    host = os.getenv("REPRO_HOST", "0.0.0.0")
    port = int(os.getenv("REPRO_PORT", "8001"))
    uvicorn.run(app, host=host, port=port)
