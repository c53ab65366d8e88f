from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    FANFOU_CONSUMER_KEY = os.getenv('FANFOU_CONSUMER_KEY')
    FANFOU_CONSUMER_SECRET = os.getenv('FANFOU_CONSUMER_SECRET')
    FANFOU_ACCESS_TOKEN = os.getenv('FANFOU_ACCESS_TOKEN')
    FANFOU_ACCESS_SECRET = os.getenv('FANFOU_ACCESS_SECRET')

    FANFOU_API_BASE = os.getenv('FANFOU_API_BASE', 'http://api.fanfou.com/')
    FANFOU_OAUTH_BASE = os.getenv('FANFOU_OAUTH_BASE', 'http://fanfou.com/oauth/')
    FANFOU_TIMEOUT = float(os.getenv('FANFOU_TIMEOUT', '10'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
