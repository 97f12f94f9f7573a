from data_designer.plugins.plugin import Plugin, PluginType

conversation_feedback_plugin = Plugin(
    config_qualified_name="soft_skills_feedback.config.ConversationFeedbackColumnConfig",
    impl_qualified_name="soft_skills_feedback.generator.ConversationFeedbackColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
