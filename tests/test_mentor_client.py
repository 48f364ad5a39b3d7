# tests/test_mentor_client.py
import json
import sys
import unittest
from pathlib import Path
from unittest.mock import AsyncMock, patch

import httpx

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from services import llm_client
from services.mentor_client import LocalMentor, MentorApiClient, TransportFailure


def client_for(handler):
    return MentorApiClient(base_url="http://mindmate.test", transport=httpx.MockTransport(handler))


class TestMentorApiClient(unittest.IsolatedAsyncioTestCase):

    async def test_posts_system_and_user_messages(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"response": "• Learn Git"})

        reply = await client_for(handler).send("Be brief.", "How to start?", 220, 0.35)

        self.assertEqual(reply.response, "• Learn Git")
        self.assertFalse(reply.fallback)
        self.assertEqual(seen["path"], "/api/chat")
        body = seen["body"]
        self.assertEqual(body["provider"], "gemini")
        self.assertEqual(body["messages"], [
            {"role": "system", "content": "Be brief."},
            {"role": "user", "content": "How to start?"},
        ])
        self.assertEqual(body["max_tokens"], 220)
        self.assertEqual(body["temperature"], 0.35)
        self.assertNotIn("model", body)

    async def test_fallback_flag(self):
        handler = lambda request: httpx.Response(200, json={"response": "canned", "fallback": True})
        reply = await client_for(handler).send("s", "u", 10, 0.1)
        self.assertTrue(reply.fallback)

    async def test_missing_response_is_empty_text(self):
        reply = await client_for(lambda request: httpx.Response(200, json={})).send("s", "u", 10, 0.1)
        self.assertEqual(reply.response, "")

    async def test_error_status_raises(self):
        handler = lambda request: httpx.Response(500, json={"detail": "Internal server error"})
        with self.assertRaises(TransportFailure):
            await client_for(handler).send("s", "u", 10, 0.1)

    async def test_network_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertRaises(TransportFailure):
            await client_for(handler).send("s", "u", 10, 0.1)

    async def test_non_json_body_raises(self):
        handler = lambda request: httpx.Response(200, text="<html>oops</html>")
        with self.assertRaises(TransportFailure):
            await client_for(handler).send("s", "u", 10, 0.1)


class TestLocalMentor(unittest.IsolatedAsyncioTestCase):

    async def test_wraps_completion(self):
        with patch.object(llm_client, "call_gemini", AsyncMock(return_value="Do X.")) as mock_call:
            reply = await LocalMentor(model_name="gemini-test").send("sys", "hi", 50, 0.2)
        self.assertEqual(reply.response, "Do X.")
        self.assertFalse(reply.fallback)
        mock_call.assert_awaited_once_with(
            "hi", system_instruction="sys", max_tokens=50, temperature=0.2, model_name="gemini-test"
        )

    async def test_failure_becomes_fallback(self):
        with patch.object(llm_client, "call_gemini", AsyncMock(side_effect=ValueError("no key"))):
            reply = await LocalMentor().send("sys", "hi", 50, 0.2)
        self.assertTrue(reply.fallback)
        self.assertIn('for: "hi"', reply.response)


if __name__ == "__main__":
    unittest.main()
