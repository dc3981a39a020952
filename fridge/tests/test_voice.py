import unittest
from fridge.domain.Recipe import Recipe
from fridge.logic.voice.commands import VoiceCommand, detect_command, help_text, recipe_speech_text


class TestVoiceCommands(unittest.TestCase):

    def test_detect_command(self):
        self.assertEqual(detect_command("Please ADD ITEM milk"), VoiceCommand.ADD_ITEM)
        self.assertEqual(detect_command("go to shopping list"), VoiceCommand.GO_TO_SHOPPING_LIST)
        self.assertEqual(detect_command("switch to high contrast mode"), VoiceCommand.HIGH_CONTRAST)
        self.assertIsNone(detect_command("hello there"))
        self.assertIsNone(detect_command(""))

    def test_help_lists_every_command(self):
        text = help_text()
        for command in VoiceCommand:
            self.assertIn(command.value.title(), text)

    def test_recipe_speech_text(self):
        recipe = Recipe(name="Quick Omelette", used_ingredients=["eggs"], missed_ingredients=["herbs"],
                        instructions=["Beat eggs.", "Cook."])
        text = recipe_speech_text(recipe)
        self.assertTrue(text.startswith("Recipe for Quick Omelette. Ingredients: eggs, herbs."))
        self.assertIn("Step 1: Beat eggs.", text)
        self.assertIn("Step 2: Cook.", text)


if __name__ == '__main__':
    unittest.main()
