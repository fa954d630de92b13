import unittest

from util.errors import ConfigurationError, ExternalServiceError, ServiceError, ValidationError


class ServiceErrorTest(unittest.TestCase):

    def test_to_log_string_without_cause(self):
        error = ServiceError("Something went wrong", error_code = 42, emoji = "🫖")

        self.assertEqual(error.to_log_string(), "[🫖 E42] Something went wrong")

    def test_to_log_string_with_cause(self):
        try:
            try:
                raise ValueError("root cause")
            except ValueError as cause:
                raise ServiceError("Something went wrong", error_code = 42, emoji = "🫖") from cause
        except ServiceError as error:
            self.assertEqual(error.to_log_string(), "[🫖 E42] Something went wrong # Caused by: root cause")

    def test_str_equals_to_log_string(self):
        error = ServiceError("Something went wrong", error_code = 42, emoji = "🫖")

        self.assertEqual(str(error), error.to_log_string())

    def test_message_is_raw(self):
        error = ServiceError("Something went wrong", error_code = 42)

        self.assertEqual(error.message, "Something went wrong")
        self.assertEqual(error.error_code, 42)


class SubclassDefaultsTest(unittest.TestCase):

    def test_validation_error(self):
        error = ValidationError("msg", error_code = 1)

        self.assertIsInstance(error, ServiceError)
        self.assertEqual(error.emoji, "✏️")

    def test_external_service_error(self):
        error = ExternalServiceError("msg", error_code = 1)

        self.assertIsInstance(error, ServiceError)
        self.assertEqual(error.emoji, "🌐")

    def test_configuration_error(self):
        error = ConfigurationError("msg", error_code = 1)

        self.assertIsInstance(error, ServiceError)
        self.assertEqual(error.emoji, "⚙️")
