from weather_report.factory import create_app

app = create_app()
